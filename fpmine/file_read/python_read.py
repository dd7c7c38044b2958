import logging
import sys
import time

from .abstract import AbstractRead

logger = logging.getLogger(__name__)


class PythonRead(AbstractRead):
    def read(self):
        start = time.time()

        with open(self.file, 'r') as f:
            lines = f.readlines()

        transactions = [
            [item.strip() for item in line.split(self.delimiter) if item.strip()]
            for line in lines
            if line.strip()
        ]
        transactions = [t for t in transactions if t]

        self.runtime = time.time() - start

        self.custom_memory["cpu"] = sum(sys.getsizeof(row) for row in transactions) + sys.getsizeof(transactions)

        logger.info("Read %d transactions from %s", len(transactions), self.file)
        return transactions
