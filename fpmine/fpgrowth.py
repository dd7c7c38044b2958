import logging
import numbers
import os
import time
from collections import Counter
from collections.abc import Iterable
from typing import Any, Dict, FrozenSet, List, Set, Tuple

import pandas as pd

from .base_algorithm import BaseAlgorithm
from .config import DEFAULT_SEPARATOR, PATTERN_SUPPORT_SEPARATOR
from .file_read import PythonRead, transactions_from_dataframe
from .tree import Tree

logger = logging.getLogger(__name__)


class FPResult:
    """
    Frequent patterns found by one mining step, plus the eliminations.

    Attributes:
        frequent_patterns (List[Tuple[Tuple[Any, ...], int]]): Patterns as
            ascending item tuples with their support, in emission order.
        elimination_sets (Set[Tuple[Any, ...]]): Input transactions that lost
            at least one item to the support filter (in input order), and
            candidate patterns whose support fell below the threshold
            (as ascending item tuples).
    """

    def __init__(self, frequent_patterns=None, elimination_sets=None) -> None:
        self.frequent_patterns: List[Tuple[Tuple[Any, ...], int]] = list(frequent_patterns or [])
        self.elimination_sets: Set[Tuple[Any, ...]] = set(elimination_sets or ())

    def extend(self, other: 'FPResult') -> None:
        self.frequent_patterns.extend(other.frequent_patterns)
        self.elimination_sets.update(other.elimination_sets)

    def frequent_patterns_num(self) -> int:
        return len(self.frequent_patterns)

    def elimination_sets_num(self) -> int:
        return len(self.elimination_sets)

    def __repr__(self) -> str:
        return (f"FPResult({self.frequent_patterns_num()} patterns, "
                f"{self.elimination_sets_num()} eliminations)")


def _check_min_support(minSup) -> None:
    if isinstance(minSup, bool) or not isinstance(minSup, numbers.Integral):
        raise TypeError(f"minSup must be an integer, got {type(minSup).__name__}")
    if minSup < 1:
        raise ValueError(f"minSup must be at least 1, got {minSup}")


class FPGrowth(BaseAlgorithm):
    """
    Frequent pattern mining with FP-Growth.

    Transactions are filtered to globally frequent items, ordered by
    descending support (ties broken by ascending item), and inserted into an
    FP-tree. The tree is then mined recursively: every frequent item is
    emitted together with the current suffix, and its prefix paths become a
    conditional tree mined with the extended suffix.

    Parameters
    ----------
    iFile : str, os.PathLike, pandas.DataFrame or iterable
        A transactional file (one transaction per line, items separated by
        ``sep``), a one-hot DataFrame, or an iterable of transactions.
    minSup : int
        Minimum support count, at least 1. Any integral type is accepted.
    sep : str, optional
        Item separator used when ``iFile`` is a path.

    Attributes
    ----------
    transactions : list
        Transactions as loaded by :py:meth:`read_file`.
    item_counts : dict
        Number of transactions containing each item.
    result : FPResult
        Output of the last :py:meth:`mine` call.
    """

    def __init__(self, iFile, minSup: int, sep: str = DEFAULT_SEPARATOR) -> None:
        super().__init__()
        _check_min_support(minSup)
        self.iFile = iFile
        self.minSup = int(minSup)
        self.sep = sep
        self.transactions: List[List[Any]] = []
        self.item_counts: Dict[Any, int] = {}
        self.result = FPResult()

    def read_file(self) -> List[List[Any]]:
        if isinstance(self.iFile, (str, os.PathLike)):
            self.transactions = PythonRead(os.fspath(self.iFile), self.sep).read()
        elif isinstance(self.iFile, pd.DataFrame):
            self.transactions = transactions_from_dataframe(self.iFile)
        elif isinstance(self.iFile, Iterable):
            self.transactions = [list(transaction) for transaction in self.iFile]
        else:
            raise TypeError(f"Unsupported input type: {type(self.iFile).__name__}")
        return self.transactions

    def _count_items(self) -> Dict[Any, int]:
        counts = Counter()
        for transaction in self.transactions:
            # an item counts once per transaction
            counts.update(set(transaction))
        return dict(counts)

    def _order_transaction(self, transaction: List[Any], frequent: Dict[Any, int]) -> List[Any]:
        ordered = sorted((item for item in transaction if item in frequent),
                         key=lambda item: (-frequent[item], item))
        deduped = []
        for item in ordered:
            if not deduped or deduped[-1] != item:
                deduped.append(item)
        return deduped

    def find_frequent_patterns(self) -> FPResult:
        """Build the FP-tree from ``self.transactions`` and mine it."""
        self.item_counts = self._count_items()
        frequent = {item: count for item, count in self.item_counts.items() if count >= self.minSup}
        logger.info("%d of %d items reach minSup=%d", len(frequent), len(self.item_counts), self.minSup)

        eliminated = set()
        tree = Tree()
        for transaction in self.transactions:
            kept = [item for item in transaction if item in frequent]
            if len(kept) != len(transaction):
                eliminated.add(tuple(transaction))
            tree.add_transaction(self._order_transaction(kept, frequent))

        result = self.find_with_suffix(tree, frozenset())
        result.elimination_sets.update(eliminated)
        return result

    def find_with_suffix(self, tree: Tree, suffix: FrozenSet[Any]) -> FPResult:
        """Mine ``tree``, whose transactions all contain ``suffix``."""
        result = FPResult()
        for item, nodes in tree.get_all_items_nodes().items():
            if item in suffix:
                # the conditional tree keeps the suffix item's own leaves
                continue
            support = sum(node.count for node in nodes)
            pattern = suffix | {item}
            if support < self.minSup:
                result.elimination_sets.add(tuple(sorted(pattern)))
                continue

            result.frequent_patterns.append((tuple(sorted(pattern)), support))
            partial_tree = Tree.generate_partial_tree(tree.generate_prefix_path(item))
            logger.debug("Mining conditional tree for %s (support %d)", sorted(pattern), support)
            result.extend(self.find_with_suffix(partial_tree, pattern))
        return result

    def mine(self) -> None:
        """Execute the FP-Growth algorithm to mine frequent patterns."""
        start = time.time()
        self.read_file()
        self.result = self.find_frequent_patterns()
        self._record_metrics(start)
        logger.info("Found %d frequent patterns in %.3f seconds",
                    self.result.frequent_patterns_num(), self.runtime)

    def get_patterns(self) -> Dict[Tuple[Any, ...], int]:
        """Return the mined patterns."""
        return dict(self.result.frequent_patterns)

    def get_eliminations(self) -> Set[Tuple[Any, ...]]:
        return set(self.result.elimination_sets)

    def getPatternsAsDataFrame(self) -> pd.DataFrame:
        """Return the mined patterns as a DataFrame with columns ``Patterns`` and ``Support``."""
        return pd.DataFrame(
            [[list(pattern), support] for pattern, support in self.result.frequent_patterns],
            columns=["Patterns", "Support"],
        )

    def save_patterns(self, output_file: str, separator: str = DEFAULT_SEPARATOR) -> None:
        """Save mined patterns to a file."""
        with open(output_file, 'w') as f:
            for pattern, count in self.result.frequent_patterns:
                items = separator.join(str(item) for item in pattern)
                f.write(f"{items}{PATTERN_SUPPORT_SEPARATOR}{count}\n")

    def printResults(self) -> None:
        """Print a summary of the mining results."""
        print(f"Total number of frequent patterns: {self.result.frequent_patterns_num()}")
        print(f"Total number of eliminations: {self.result.elimination_sets_num()}")
        super().printResults()


def find_frequent_patterns(transactions: Iterable[Iterable[Any]], minimum_support: int) -> FPResult:
    """Mine ``transactions`` in memory and return the :py:class:`FPResult`."""
    miner = FPGrowth(transactions, minimum_support)
    miner.read_file()
    return miner.find_frequent_patterns()
