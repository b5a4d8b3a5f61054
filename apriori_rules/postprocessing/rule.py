def filter_rules(rules, criterion: str, threshold: float):
    """
    Filters rules based on a criterion >= threshold.

    Args:
        rules: List of rule dictionaries
        criterion: The rule metric to filter on (e.g., 'support', 'confidence', 'lift')
        threshold: Minimum value for the criterion (inclusive)

    Returns:
        List of rules meeting the criterion
    """
    # Fast filtering with list comprehension
    filtered_rule_list = [rule for rule in rules if rule.get(criterion, float("-inf")) >= threshold]

    return filtered_rule_list


def _label_hits(labels, patterns):
    """For each pattern, whether it occurs (case-insensitively) in any label."""
    lowered = [str(label).lower() for label in labels or []]
    return [any(p.lower() in label for label in lowered) for p in patterns]


def filter_rules_by_pattern(
    rules,
    antecedent_contains: list = None,
    consequent_contains: list = None,
    antecedent_excludes: list = None,
    consequent_excludes: list = None,
    match_any: bool = False
):
    """
    Filter rules by substrings of their antecedent/consequent labels.

    Patterns match case-insensitively, so 'bread' matches both 'bread' and
    'product__bread'.

    Args:
        rules: List of rule dictionaries with 'antecedent' and 'consequent' label lists
        antecedent_contains: Patterns that must appear in the antecedent
        consequent_contains: Patterns that must appear in the consequent
        antecedent_excludes: Patterns that must NOT appear in the antecedent
        consequent_excludes: Patterns that must NOT appear in the consequent
        match_any: If True, one matching *_contains pattern is enough; otherwise all must match

    Returns:
        List of filtered rules
    """
    check = any if match_any else all

    def keep(rule):
        ant = rule.get('antecedent')
        cons = rule.get('consequent')
        if antecedent_contains and not check(_label_hits(ant, antecedent_contains)):
            return False
        if consequent_contains and not check(_label_hits(cons, consequent_contains)):
            return False
        if antecedent_excludes and any(_label_hits(ant, antecedent_excludes)):
            return False
        if consequent_excludes and any(_label_hits(cons, consequent_excludes)):
            return False
        return True

    return [rule for rule in rules if keep(rule)]


def _itemset_metric(itemset, criterion: str):
    if criterion == 'size':
        return len(itemset.get('items', []))
    return itemset.get(criterion, float("-inf"))


def filter_itemsets(itemsets, criterion: str = 'support', threshold: float = 0.0):
    """
    Filters frequent itemsets based on a criterion >= threshold.

    Args:
        itemsets: List of itemset dictionaries (each with 'items' and 'support' keys)
        criterion: 'support', 'size' (number of items) or any other numeric key
        threshold: Minimum value for the criterion (inclusive)

    Returns:
        Tuple of (filtered_itemsets, stats) where stats holds the count and
        average support of the kept itemsets
    """
    kept = [itemset for itemset in itemsets if _itemset_metric(itemset, criterion) >= threshold]

    if not kept:
        return kept, {"num_itemsets": 0, "average_support": 0.0}

    avg_support = sum(item.get("support", 0) for item in kept) / len(kept)
    return kept, {
        "num_itemsets": len(kept),
        "average_support": round(avg_support, 3),
    }
