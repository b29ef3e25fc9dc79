import os
import logging
import sys
from typing import Union




PathLike = Union[str, os.PathLike]
LOGGER_NAME = "pytarscan"
LOG_FORMAT = "%(name)s: %(message)s"




def get_logger(verbose=True, name=LOGGER_NAME, stream=None):
    logger = logging.getLogger(name)

    if logger.hasHandlers():
        logger.handlers.clear()

    if verbose:
        console_handler = logging.StreamHandler(stream)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.setLevel(logging.INFO)
        logger.addHandler(console_handler)
    else:
        logger.addHandler(logging.NullHandler())

    logger.propagate = False
    return logger



def quiet_logger():
    return get_logger(verbose=False, name=f"{LOGGER_NAME}.quiet")



def bytes_to_str(obj):
    # surrogateescape keeps undecodable name bytes intact for the filesystem
    if isinstance(obj, (bytes, bytearray)):
        obj = bytes(obj).decode("utf-8", errors="surrogateescape")
    return obj


def is_string(string):
    return isinstance(string, str)


def is_pathlike(fp):
    return isinstance(fp, (str, os.PathLike))


def to_posix(fp):
    if is_pathlike(fp) and hasattr(fp, "as_posix"):
        fp = fp.as_posix()
    return os.fspath(fp) if is_pathlike(fp) else fp


def unpack_error(e):
    return str(e.args[0] if e.args else e)


def type_name(obj) -> str:
    if not isinstance(obj, type):
        obj = type(obj)

    def _gattr(n):
        return getattr(obj, n, None)

    return _gattr("__name__") or _gattr("__qualname__") or repr(obj)


def terminate(status=0):
    sys.exit(int(status))
