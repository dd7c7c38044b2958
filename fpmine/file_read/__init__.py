from .abstract import AbstractRead, bytes_to_mb
from .pandas_read import PandasRead, transactions_from_dataframe
from .python_read import PythonRead

READERS = {
    "python": PythonRead,
    "pandas": PandasRead,
}

__all__ = [
    "AbstractRead",
    "PandasRead",
    "PythonRead",
    "READERS",
    "bytes_to_mb",
    "transactions_from_dataframe",
]
