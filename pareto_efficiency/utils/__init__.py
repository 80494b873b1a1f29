from .logger import LoggerFormatter, dump_logger, get_logger, load_logger
from .utils import sign, timeit

__all__ = [
    "get_logger",
    "dump_logger",
    "load_logger",
    "LoggerFormatter",
    "sign",
    "timeit",
]
