from .excel_io import (
    save_rule_mining_results,
    save_rules_text,
    format_rule,
    format_itemset,
    render_results
)
from .log import setup_logging

__all__ = [
    'save_rule_mining_results',
    'save_rules_text',
    'format_rule',
    'format_itemset',
    'render_results',
    'setup_logging'
]
