import csv
import logging
import time

import pandas as pd

from .abstract import AbstractRead

logger = logging.getLogger(__name__)


def transactions_from_dataframe(df: pd.DataFrame):
    """Convert a one-hot DataFrame into a list of transactions.

    Each row is a transaction and each column an item; a cell is treated as
    present when it is truthy (``True`` or non-zero). Column labels become
    the items.
    """
    present = df.fillna(0).astype(bool)
    columns = list(present.columns)
    return [
        [columns[i] for i, flag in enumerate(row) if flag]
        for row in present.itertuples(index=False, name=None)
    ]


class PandasRead(AbstractRead):
    def read(self):
        start = time.time()
        width = self.get_max_cols()
        if width == 0:
            self.runtime = time.time() - start
            self.custom_memory["cpu"] = 0
            return []

        # ragged rows: name every column so short rows are padded with ''
        df = pd.read_csv(
            self.file,
            sep=self.delimiter,
            header=None,
            names=list(range(width)),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            quoting=csv.QUOTE_NONE,
        ).fillna("")
        self.runtime = time.time() - start

        self.custom_memory["cpu"] = int(df.memory_usage(deep=True).sum())

        transactions = [
            [item.strip() for item in row if item.strip()]
            for row in df.itertuples(index=False, name=None)
        ]
        transactions = [t for t in transactions if t]
        logger.info("Read %d transactions from %s", len(transactions), self.file)
        return transactions
