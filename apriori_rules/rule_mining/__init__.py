"""
Rule Mining Module

Apriori mining over bitset itemsets:
- Frequent itemset mining (level-wise candidate join and support pruning)
- Association rule mining (subset splits scored by confidence and lift)
"""
