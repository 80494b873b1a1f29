import logging
import sys
from typing import List, Union

import dill


class LoggerFormatter(logging.Formatter):
    """Formatter switching the record layout on the level of each record"""

    default_time_format = "%m/%d/%Y %H:%M:%S"
    default_msec_format = "%s,%02d"
    FORMATS = {
        logging.DEBUG: "%(asctime)s - [%(name)s.%(levelname)s] {%(module)s:%(lineno)d} -- %(message)s",
        logging.INFO: "%(asctime)s - [%(name)s.%(levelname)s] -- %(message)s",
        logging.WARNING: "%(asctime)s - [%(name)s.%(levelname)s] -- %(message)s",
        logging.ERROR: "%(asctime)s - [%(name)s.%(levelname)s] {%(pathname)s:%(lineno)d} -- %(message)s",
        "DEFAULT": "%(asctime)s - %(levelname)s -- %(message)s",
    }

    def __init__(self, fmt="%(asctime)s - %(levelname)s -- %(message)s"):
        super().__init__(fmt=fmt, datefmt=None, style="%")
        self._default_fmt = fmt

    def format(self, record):
        _fmt = self._style._fmt
        self._style._fmt = self.FORMATS.get(record.levelno, self._default_fmt)
        try:
            return logging.Formatter.format(self, record)
        finally:
            self._style._fmt = _fmt


def get_logger(
    logger_id: str, file: Union[str, List[str]] = None, console: bool = False
) -> logging.Logger:
    """Create (or fetch) the logger named `logger_id`

    Parameters
    ----------
    logger_id : str
        name of the logger; the same name always yields the same instance
    file : Union[str, List[str]], optional
        path(s) of the log file(s), by default None, which turns off file logging
    console : bool, optional
        whether to print INFO records to stdout, by default False
    """
    logger = logging.getLogger(str(logger_id))
    logger.setLevel(logging.DEBUG)

    fmt = LoggerFormatter()
    SH = [
        h
        for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    if len(SH) == 0 and console:
        sh = logging.StreamHandler(sys.stdout)
        sh.setLevel(logging.INFO)
        sh.setFormatter(fmt)
        logger.addHandler(sh)

    if file is not None:
        file = [file] if isinstance(file, str) else file
        FH = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        for f in set(file) - set(fh.baseFilename for fh in FH):
            try:
                fh = logging.FileHandler(f)
            except FileNotFoundError:
                logger.warning(f"cannot open the log file {f}")
                continue
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(fmt)
            logger.addHandler(fh)

    logger.propagate = False
    return logger


def dump_logger(logger: logging.Logger) -> bytes:
    FHs = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    log_file = None if len(FHs) == 0 else [fh.baseFilename for fh in FHs]
    SH = [
        h
        for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    return dill.dumps({"logger_id": logger.name, "console": len(SH) != 0, "file": log_file})


def load_logger(logger_str: bytes) -> logging.Logger:
    return get_logger(**dill.loads(logger_str))
