"""
Rule Mining Experiment: Basket Transactions

Reads a basket file (one comma-separated transaction per line), mines the
final frequent itemset level with Apriori and prints every itemset followed
by the rules derived from it. Optionally saves the results to Excel and text.
"""
import argparse
import logging
from datetime import datetime
from pathlib import Path

from apriori_rules.experiments.base import load_data, run_rule_mining, generate_output_filename
from apriori_rules.experiments.config import (
    DataConfig, AprioriConfig, RuleMiningConfig, FilterConfig, PatternConfig, ExperimentConfig
)
from apriori_rules.utils.excel_io import render_results, save_rule_mining_results, save_rules_text
from apriori_rules.utils.log import setup_logging

# =============================================================================
# CONFIGURATION
# =============================================================================

EXPERIMENT_NAME = "basket"
DATA_PATH = "./data/transactions.txt"
OUTPUT_DIR = "./out/apriori_rules"

MIN_SUPPORT = 0.5
MIN_CONFIDENCE = 0.7
MIN_LIFT = None
MAX_ITERATIONS = 10


# =============================================================================
# EXPERIMENT
# =============================================================================

def run_experiment(config: ExperimentConfig, show_metrics: bool = False):
    print("=" * 70)
    print("APRIORI RULE MINING")
    print("=" * 70)

    # Load data
    print("\n[1] Loading data...")
    data = load_data(config.data)
    print(f"  Transactions: {len(data.transactions)}")
    print(f"  Items: {data.items.count()}")

    # Mine
    print("\n[2] Mining frequent itemsets and rules...")
    cfg = config.mining.miner_config
    print(f"  min_support={cfg.min_support}, min_confidence={cfg.min_confidence}, "
          f"min_lift={cfg.min_lift}, max_iterations={cfg.max_iterations}")
    if config.mining.patterns.is_active():
        print(f"  patterns: {config.mining.patterns.to_dict()}")
    results, stats = run_rule_mining(data, config.mining)

    if stats.get('warning'):
        print(f"WARNING: {stats['warning']}")

    print(render_results(results, show_metrics=show_metrics))

    print(f"\n{'=' * 70}")
    print(f"Frequent itemsets: {stats['num_itemsets']}")
    print(f"Rules: {stats['count']}")
    print(f"Levels joined: {stats['iterations']} (converged: {stats['converged']})")

    if config.output_dir:
        print(f"\n[3] Saving results...")
        filename = generate_output_filename(config.name, config.mining.mode, config.data.name)
        output_file = config.get_output_path(filename)
        params = {
            'data_path': config.data.path,
            **config.mining.to_dict()['miner_config'],
            'timestamp': datetime.now().isoformat()
        }
        save_rule_mining_results(results, stats, output_file, parameters=params)
        save_rules_text(results, output_file, title="APRIORI RULES",
                        metadata={'data_path': config.data.path})
        print(f"Output: {output_file}.xlsx")

    print("=" * 70)
    return results, stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mine frequent itemsets and association rules with Apriori.")
    parser.add_argument('path', nargs='?', default=DATA_PATH, help="transaction file, one basket per line")
    parser.add_argument('--delimiter', default=',', help="item delimiter (default: ',')")
    parser.add_argument('--encoding', default='utf-8', help="transaction file encoding (default: utf-8)")
    parser.add_argument('--min-support', type=float, default=MIN_SUPPORT)
    parser.add_argument('--min-confidence', type=float, default=MIN_CONFIDENCE)
    parser.add_argument('--min-lift', type=float, default=MIN_LIFT,
                        help="minimum rule lift (default: lift is reported but not filtered)")
    parser.add_argument('--max-iterations', type=int, default=MAX_ITERATIONS)
    parser.add_argument('--max-items', type=int, default=None, help="maximum itemset size")
    parser.add_argument('--filter', nargs=2, action='append', default=[], metavar=('METRIC', 'THRESHOLD'),
                        help="keep rules with METRIC >= THRESHOLD (repeatable)")
    parser.add_argument('--antecedent', action='append', default=[], metavar='PATTERN',
                        help="keep rules with an antecedent label containing PATTERN (repeatable)")
    parser.add_argument('--consequent', action='append', default=[], metavar='PATTERN',
                        help="keep rules with a consequent label containing PATTERN (repeatable)")
    parser.add_argument('--exclude-antecedent', action='append', default=[], metavar='PATTERN',
                        help="drop rules with an antecedent label containing PATTERN (repeatable)")
    parser.add_argument('--exclude-consequent', action='append', default=[], metavar='PATTERN',
                        help="drop rules with a consequent label containing PATTERN (repeatable)")
    parser.add_argument('--match-any', action='store_true',
                        help="a rule matches when any PATTERN hits (default: all must)")
    parser.add_argument('--output-dir', default=None, help=f"save Excel/text results (e.g. {OUTPUT_DIR})")
    parser.add_argument('--metrics', action='store_true', help="print support/confidence/lift per rule")
    parser.add_argument('-v', '--verbose', action='store_true', help="debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = ExperimentConfig(
            name=EXPERIMENT_NAME,
            data=DataConfig(path=args.path, name=Path(args.path).stem,
                            delimiter=args.delimiter, encoding=args.encoding),
            mining=RuleMiningConfig(
                miner_config=AprioriConfig(
                    min_support=args.min_support,
                    min_confidence=args.min_confidence,
                    min_lift=args.min_lift,
                    max_iterations=args.max_iterations,
                    max_items=args.max_items
                ),
                filters=[FilterConfig(metric, float(threshold)) for metric, threshold in args.filter],
                patterns=PatternConfig(
                    antecedent_contains=args.antecedent,
                    consequent_contains=args.consequent,
                    antecedent_excludes=args.exclude_antecedent,
                    consequent_excludes=args.exclude_consequent,
                    match_any=args.match_any
                )
            ),
            output_dir=args.output_dir
        )
        run_experiment(config, show_metrics=args.metrics)
    except ValueError as e:
        print(f"Error: {e}")
        return 2
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
