import os
import time
from abc import ABC, abstractmethod

import psutil


class BaseAlgorithm(ABC):
    """Base class for algorithm implementations.

    Subclasses call :py:meth:`_record_metrics` at the end of :py:meth:`mine`
    so that ``runtime`` (seconds), ``memoryRSS`` (bytes) and ``memoryUSS``
    (bytes) are available afterwards.
    """

    def __init__(self) -> None:
        self.runtime = None
        self.memoryRSS = None
        self.memoryUSS = None

    @abstractmethod
    def mine(self) -> None:
        """Run the algorithm."""
        pass

    def _record_metrics(self, start: float) -> None:
        self.runtime = time.time() - start
        proc = psutil.Process(os.getpid())
        self.memoryRSS = proc.memory_info().rss
        self.memoryUSS = proc.memory_full_info().uss

    def getRuntime(self):
        """Return the runtime of the last execution."""
        return self.runtime

    def getMemoryRSS(self):
        """Return the resident set size memory usage."""
        return self.memoryRSS

    def getMemoryUSS(self):
        """Return the unique set size memory usage."""
        return self.memoryUSS

    def printResults(self) -> None:
        print(f"Runtime: {self.runtime}")
        print(f"Memory RSS: {self.memoryRSS}")
        print(f"Memory USS: {self.memoryUSS}")
