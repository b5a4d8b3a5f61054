import logging
import pandas as pd
from pathlib import Path
from datetime import datetime
from typing import Dict, List, Any, Union, Iterable

logger = logging.getLogger(__name__)


def format_itemset(items: Iterable[str]) -> str:
    """Render labels as '{ A, B, C }'."""
    items = list(items)
    if not items:
        return "{ }"
    return "{ " + ", ".join(str(item) for item in items) + " }"


def format_rule(rule: Dict[str, Any]) -> str:
    """Render a rule dict as '<antecedent labels> -> <consequent labels>'."""
    antecedent = ' '.join(str(item) for item in rule.get('antecedent', []))
    consequent = ' '.join(str(item) for item in rule.get('consequent', []))
    return f"{antecedent} -> {consequent}"


def render_results(results: List[Dict[str, Any]], show_metrics: bool = False) -> str:
    """
    Console report: each frequent itemset followed by its rules.

    Args:
        results: Output of AprioriMiner.mine (dicts with 'items', 'support', 'rules')
        show_metrics: Append support/confidence/lift to every rule line
    """
    lines = []
    for result in results:
        lines.append("")
        lines.append(format_itemset(result['items']))
        lines.append("Association Rules:")
        for rule in result.get('rules', []):
            line = format_rule(rule)
            if show_metrics:
                line += (f"  (support={rule['support']:.4f}, "
                         f"confidence={rule['confidence']:.4f}, lift={rule['lift']:.4f})")
            lines.append(line)
    return "\n".join(lines)


def _rules_frame(results: List[Dict[str, Any]]) -> pd.DataFrame:
    rows = []
    for result in results:
        for rule in result.get('rules', []):
            rows.append({
                'itemset': format_itemset(result['items']),
                'rule': format_rule(rule),
                'antecedent': ' '.join(rule['antecedent']),
                'consequent': ' '.join(rule['consequent']),
                'support': rule['support'],
                'confidence': rule['confidence'],
                'lift': rule['lift']
            })
    return pd.DataFrame(rows, columns=['itemset', 'rule', 'antecedent', 'consequent',
                                       'support', 'confidence', 'lift'])


def save_rule_mining_results(
    results: List[Dict[str, Any]],
    stats: Dict[str, Any],
    output_path: Union[str, Path],
    parameters: Dict[str, Any] = None,
    metadata: Dict[str, Any] = None
) -> Path:
    """
    Save mining results to Excel with multiple sheets.

    Sheets:
        - Itemsets: Final frequent itemsets with support and rule counts
        - Rules: All emitted rules with metrics
        - Summary: Aggregate statistics
        - Parameters: Miner parameters used

    Args:
        results: Output of AprioriMiner.mine
        stats: Statistics dictionary from mining
        output_path: Output file path (will add .xlsx if needed)
        parameters: Miner parameters used
        metadata: Additional metadata (dataset name, timestamp, etc.)
    """
    output_path = Path(output_path)
    if output_path.suffix != '.xlsx':
        output_path = output_path.with_suffix('.xlsx')
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with pd.ExcelWriter(output_path, engine='openpyxl') as writer:
        # Sheet 1: Itemsets
        itemsets_df = pd.DataFrame(
            [{
                'itemset': format_itemset(r['items']),
                'size': len(r['items']),
                'support': r['support'],
                'num_rules': len(r.get('rules', []))
            } for r in results],
            columns=['itemset', 'size', 'support', 'num_rules']
        )
        itemsets_df.to_excel(writer, sheet_name='Itemsets', index=False)

        # Sheet 2: Rules
        _rules_frame(results).to_excel(writer, sheet_name='Rules', index=False)

        # Sheet 3: Summary
        summary_data = {
            'Metric': list(stats.keys()),
            'Value': [str(v) if v is None else v for v in stats.values()]
        }
        if metadata:
            summary_data['Metric'].extend(list(metadata.keys()))
            summary_data['Value'].extend(list(metadata.values()))
        summary_df = pd.DataFrame(summary_data)
        summary_df.to_excel(writer, sheet_name='Summary', index=False)

        # Sheet 4: Parameters
        if parameters:
            params_df = pd.DataFrame({
                'Parameter': list(parameters.keys()),
                'Value': [str(v) for v in parameters.values()]
            })
            params_df.to_excel(writer, sheet_name='Parameters', index=False)

    logger.info("Results saved to: %s", output_path)
    return output_path


def save_rules_text(
    results: List[Dict[str, Any]],
    output_path: Union[str, Path],
    title: str = "MINED RULES",
    metadata: Dict[str, Any] = None
) -> Path:
    """
    Save frequent itemsets and their rules in human-readable text format.

    Args:
        results: Output of AprioriMiner.mine
        output_path: Output file path (will add .txt if needed)
        title: Title for the output file header
        metadata: Optional metadata to include in header
    """
    output_path = Path(output_path)
    if output_path.suffix != '.txt':
        output_path = output_path.with_suffix('.txt')
    output_path.parent.mkdir(parents=True, exist_ok=True)

    total_rules = sum(len(r.get('rules', [])) for r in results)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write("=" * 80 + "\n")
        f.write(f"{title}\n")
        f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
        if metadata:
            for key, val in metadata.items():
                f.write(f"{key}: {val}\n")
        f.write("=" * 80 + "\n")

        if not results:
            f.write("\nNo frequent itemsets found.\n")
        else:
            f.write(render_results(results, show_metrics=True) + "\n")

        f.write("\n" + "=" * 80 + "\n")
        f.write(f"Frequent itemsets: {len(results)}\n")
        f.write(f"Total rules: {total_rules}\n")
        f.write("=" * 80 + "\n")

    logger.info("Rules saved to: %s", output_path)
    return output_path
