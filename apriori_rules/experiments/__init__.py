from .config import (
    DataConfig,
    AprioriConfig,
    RuleMiningConfig,
    FilterConfig,
    PatternConfig,
    ExperimentConfig
)
from .base import (
    load_data,
    run_rule_mining,
    create_miner,
    apply_filters,
    generate_output_filename
)

__all__ = [
    'DataConfig',
    'AprioriConfig',
    'RuleMiningConfig',
    'FilterConfig',
    'PatternConfig',
    'ExperimentConfig',
    'load_data',
    'run_rule_mining',
    'create_miner',
    'apply_filters',
    'generate_output_filename'
]
