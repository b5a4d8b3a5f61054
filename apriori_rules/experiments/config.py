from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
from pathlib import Path

from apriori_rules.preprocessing.transactions import DEFAULT_TRANSACTIONS_PATH
from apriori_rules.rule_mining.apriori_miner import DEFAULT_MAX_ITERATIONS
from apriori_rules.rule_mining.rules import MAX_BITMASK_ITEMS


@dataclass
class DataConfig:
    path: str = DEFAULT_TRANSACTIONS_PATH
    name: str = "transactions"
    delimiter: str = ","
    encoding: str = "utf-8"

    def to_dict(self) -> Dict[str, Any]:
        return {'path': self.path, 'name': self.name, 'delimiter': self.delimiter,
                'encoding': self.encoding}


@dataclass
class AprioriConfig:
    min_support: float = 0.5
    min_confidence: float = 0.7
    # None keeps lift as a reported metric only
    min_lift: Optional[float] = None
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    max_items: Optional[int] = None
    max_rule_items: int = MAX_BITMASK_ITEMS

    def to_dict(self) -> Dict[str, Any]:
        return {
            'min_support': self.min_support,
            'min_confidence': self.min_confidence,
            'min_lift': self.min_lift,
            'max_iterations': self.max_iterations,
            'max_items': self.max_items,
            'max_rule_items': self.max_rule_items
        }


@dataclass
class FilterConfig:
    metric: str
    threshold: float

    def to_dict(self) -> Dict[str, Any]:
        return {'metric': self.metric, 'threshold': self.threshold}


@dataclass
class PatternConfig:
    # substrings of item labels, matched case-insensitively
    antecedent_contains: List[str] = field(default_factory=list)
    consequent_contains: List[str] = field(default_factory=list)
    antecedent_excludes: List[str] = field(default_factory=list)
    consequent_excludes: List[str] = field(default_factory=list)
    match_any: bool = False

    def is_active(self) -> bool:
        return bool(self.antecedent_contains or self.consequent_contains
                    or self.antecedent_excludes or self.consequent_excludes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'antecedent_contains': list(self.antecedent_contains),
            'consequent_contains': list(self.consequent_contains),
            'antecedent_excludes': list(self.antecedent_excludes),
            'consequent_excludes': list(self.consequent_excludes),
            'match_any': self.match_any
        }


@dataclass
class RuleMiningConfig:
    miner_config: AprioriConfig = field(default_factory=AprioriConfig)
    mode: str = 'both'  # 'rules', 'itemsets', 'both'
    filters: List[FilterConfig] = field(default_factory=list)
    patterns: PatternConfig = field(default_factory=PatternConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'miner_type': 'apriori',
            'miner_config': self.miner_config.to_dict(),
            'mode': self.mode,
            'filters': [f.to_dict() for f in self.filters],
            'patterns': self.patterns.to_dict()
        }

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'RuleMiningConfig':
        return cls(
            miner_config=AprioriConfig(**config.get('miner_config', {})),
            mode=config.get('mode', 'both'),
            filters=[FilterConfig(**f) for f in config.get('filters', [])],
            patterns=PatternConfig(**config.get('patterns', {}))
        )


@dataclass
class ExperimentConfig:
    name: str
    data: DataConfig
    mining: RuleMiningConfig = field(default_factory=RuleMiningConfig)
    # None = print only, nothing saved
    output_dir: Optional[str] = None

    def get_output_path(self, suffix: str = "") -> Path:
        if self.output_dir is None:
            raise ValueError(f"Experiment '{self.name}' has no output_dir")
        path = Path(self.output_dir)
        path.mkdir(parents=True, exist_ok=True)
        return path / suffix if suffix else path
