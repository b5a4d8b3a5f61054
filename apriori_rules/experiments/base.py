import logging
from datetime import datetime
from typing import List, Dict, Any, Tuple

from apriori_rules.preprocessing.transactions import read_transactions
from apriori_rules.rule_mining.apriori_miner import AprioriMiner
from apriori_rules.rule_mining.exceptions import InputUnavailableError
from apriori_rules.rule_mining.store import TransactionData
from apriori_rules.postprocessing.rule import filter_rules, filter_rules_by_pattern, filter_itemsets

from .config import DataConfig, RuleMiningConfig, FilterConfig, PatternConfig

logger = logging.getLogger(__name__)

VALID_MODES = ['rules', 'itemsets', 'both']


def load_data(config: DataConfig) -> TransactionData:
    """
    Read the transaction file named by config.

    An unreadable file is logged and yields an empty TransactionData, so
    mining still runs and reports empty results.
    """
    try:
        return read_transactions(config.path, delimiter=config.delimiter, encoding=config.encoding)
    except InputUnavailableError as e:
        logger.error("%s", e)
        return TransactionData()


def create_miner(config: RuleMiningConfig, show_progress: bool = False) -> AprioriMiner:
    cfg = config.miner_config
    return AprioriMiner(
        min_support=cfg.min_support,
        min_confidence=cfg.min_confidence,
        min_lift=cfg.min_lift,
        max_items=cfg.max_items,
        max_iterations=cfg.max_iterations,
        max_rule_items=cfg.max_rule_items,
        show_progress=show_progress
    )


def apply_filters(
    data: List[Dict],
    filters: List[FilterConfig],
    mode: str = 'rules',
    patterns: PatternConfig = None
) -> List[Dict]:
    """
    Apply metric filters, then (rules only) label pattern filters.
    """
    use_patterns = mode == 'rules' and patterns is not None and patterns.is_active()
    if not filters and not use_patterns:
        return data

    result = data
    for f in filters:
        if mode == 'rules':
            result = filter_rules(result, criterion=f.metric, threshold=f.threshold)
        else:
            result, _ = filter_itemsets(result, criterion=f.metric, threshold=f.threshold)

    if use_patterns:
        result = filter_rules_by_pattern(result, **patterns.to_dict())

    return result


def run_rule_mining(
    data: TransactionData,
    config: RuleMiningConfig,
    show_progress: bool = False
) -> Tuple[List[Dict], Dict[str, Any]]:
    """
    Mine data according to config.

    Returns:
        Tuple of (results, stats). In 'both' mode results holds one dict per
        frequent itemset with its rules; otherwise a flat list of itemsets or
        rules.
    """
    mode = config.mode
    if mode not in VALID_MODES:
        raise ValueError(f"Mode must be one of {VALID_MODES}, got '{mode}'")

    miner = create_miner(config, show_progress=show_progress)

    if mode == 'itemsets':
        itemsets, stats = miner.mine_itemsets(data)
        itemsets = apply_filters(itemsets, config.filters, mode='itemsets')
        stats['count'] = len(itemsets)
        return itemsets, stats

    if mode == 'rules':
        rules, stats = miner.mine_rules(data)
        rules = apply_filters(rules, config.filters, mode='rules', patterns=config.patterns)
        stats['count'] = len(rules)
        return rules, stats

    results, stats = miner.mine(data)
    for result in results:
        result['rules'] = apply_filters(result['rules'], config.filters, mode='rules', patterns=config.patterns)
    stats['count'] = sum(len(r['rules']) for r in results)
    return results, stats


def generate_output_filename(
    experiment_name: str,
    mode: str,
    dataset_name: str
) -> str:
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return f"{timestamp}_{experiment_name}_apriori_{mode}_{dataset_name}"
