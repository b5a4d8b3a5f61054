"""
Builders for the item dictionary and transaction store.

Transactions come from a basket file (one transaction per line, labels
separated by a delimiter), from in-memory label lists, or from a tabular
DataFrame where every non-null cell becomes a ``feature__value`` item.
"""
import logging
from pathlib import Path
from typing import Iterable, Sequence, Union

import pandas as pd

from apriori_rules.rule_mining.exceptions import InputUnavailableError
from apriori_rules.rule_mining.items import ItemDictionary
from apriori_rules.rule_mining.itemset import Itemset
from apriori_rules.rule_mining.store import TransactionData, TransactionStore

logger = logging.getLogger(__name__)

DEFAULT_TRANSACTIONS_PATH = "./data/transactions.txt"


def transactions_from_records(records: Iterable[Sequence[str]]) -> TransactionData:
    """
    Build TransactionData from label lists.

    Labels are stripped of surrounding whitespace and empty labels are
    ignored. Items get positions in the order they are first seen.
    """
    items = ItemDictionary()
    transactions = []
    for record in records:
        itemset = Itemset()
        for label in record:
            label = str(label).strip()
            if not label:
                continue
            itemset.set_bit(items.add_item(label))
        transactions.append(itemset)

    logger.debug("Built %d transactions over %d items", len(transactions), items.count())
    return TransactionData(items=items, transactions=TransactionStore(transactions))


def read_transactions(
    path: Union[str, Path] = DEFAULT_TRANSACTIONS_PATH,
    delimiter: str = ',',
    encoding: str = 'utf-8'
) -> TransactionData:
    """
    Read a basket file with one transaction per line.

    Labels are stripped of surrounding whitespace, empty labels are dropped
    and blank lines are skipped. Blank lines therefore do not count as
    (empty) transactions, which changes the support denominator compared
    with reading every physical line, and ' milk' and 'milk' are one item.

    Args:
        path: Path to the transaction file
        delimiter: Character separating item labels on a line
        encoding: Text encoding of the file (e.g. 'latin-1' for legacy exports)

    Returns:
        TransactionData with the item dictionary and transaction store

    Raises:
        InputUnavailableError: If the file cannot be opened or decoded
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding=encoding) as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnavailableError(f"Unable to read transaction file [{path}]: {e}") from e

    records = [line.split(delimiter) for line in lines if line.strip()]
    logger.info("Read %d transactions from %s", len(records), path)
    return transactions_from_records(records)


def transactions_from_dataframe(data: pd.DataFrame) -> TransactionData:
    """
    Convert a DataFrame of categorical values into transactions.

    Each row becomes one transaction of ``feature__value`` items; NaN cells
    are skipped.
    """
    records = []
    for _, row in data.iterrows():
        transaction = []
        for col in data.columns:
            value = row[col]
            # Skip NaN values
            if pd.notna(value):
                transaction.append(f"{col}__{value}")
        records.append(transaction)

    return transactions_from_records(records)


def as_transaction_data(data) -> TransactionData:
    """Coerce any supported miner input into TransactionData."""
    if isinstance(data, TransactionData):
        return data
    if isinstance(data, pd.DataFrame):
        return transactions_from_dataframe(data)
    if isinstance(data, (str, Path)):
        raise TypeError("Pass file paths through read_transactions() first")
    return transactions_from_records(data)
