from abc import ABC, abstractmethod
import os

import psutil

from ..config import DEFAULT_SEPARATOR


def bytes_to_mb(bytes):
    return bytes / 1024 / 1024


class AbstractRead(ABC):
    def __init__(self, file, delimiter=DEFAULT_SEPARATOR):
        self.file = file
        self.delimiter = delimiter
        self.custom_memory = {}
        self.runtime = None

    def get_max_cols(self):
        """
        Returns the number of items in the longest transaction of the file.
        """
        max_cols = 0
        with open(self.file, 'r') as f:
            for line in f:
                if line.strip():
                    max_cols = max(max_cols, len(line.rstrip("\r\n").split(self.delimiter)))
        return max_cols

    @abstractmethod
    def read(self):
        """
        Reads the file and returns a list of transactions, each a list of items.
        Blank lines are skipped, items are stripped of surrounding whitespace,
        empty items are dropped, and quote characters are kept as part of the
        item.
        """
        pass

    def get_runtime(self):
        """
        Returns the runtime of the file reading process.
        """
        return self.runtime

    def get_memory(self):
        """
        Returns the current memory usage of the process in bytes.
        """
        return psutil.Process(os.getpid()).memory_info().rss

    def get_custom_memory(self):
        """
        Returns any custom memory usage information tracked by the implementation.
        """
        return self.custom_memory
