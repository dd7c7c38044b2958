"""Frequent itemset mining with FP-Growth."""
from .fpgrowth import FPGrowth, FPResult, find_frequent_patterns
from .tree import Node, Tree

__version__ = "0.1.0"

__all__ = ["FPGrowth", "FPResult", "Node", "Tree", "find_frequent_patterns"]
