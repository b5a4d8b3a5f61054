"""
Apriori frequent itemset and association rule mining.
"""
from apriori_rules.rule_mining.exceptions import (
    AprioriError,
    UnknownItemError,
    InputUnavailableError,
    IterationCapWarning
)
from apriori_rules.rule_mining.items import ItemDictionary
from apriori_rules.rule_mining.itemset import Itemset, union
from apriori_rules.rule_mining.store import TransactionStore, TransactionData
from apriori_rules.rule_mining.frequency import FrequencyEngine, support
from apriori_rules.rule_mining.rules import Rule, RuleGenerator
from apriori_rules.rule_mining.apriori_miner import AprioriMiner
from apriori_rules.preprocessing.transactions import (
    read_transactions,
    transactions_from_records,
    transactions_from_dataframe
)

__version__ = "0.1.0"

__all__ = [
    'AprioriError',
    'UnknownItemError',
    'InputUnavailableError',
    'IterationCapWarning',
    'ItemDictionary',
    'Itemset',
    'union',
    'TransactionStore',
    'TransactionData',
    'FrequencyEngine',
    'support',
    'Rule',
    'RuleGenerator',
    'AprioriMiner',
    'read_transactions',
    'transactions_from_records',
    'transactions_from_dataframe'
]
