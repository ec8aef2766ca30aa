from logging import *
import sys
import os

log = getLogger('wasmtx')

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '[%(asctime)-23s %(levelname)-4s %(name)s] %(message)s'


def set_logger(level=WARNING, path=None, f_remove=False, stream=None):
    """
    Setup wasmtx package logger, other loggers are left alone
    :param level: logging level of handlers.
    :param path: also recode to this file.
    :param f_remove: remove log file before recode.
    :param stream: console output, stderr as default so stdout keeps tx document only.
    :return: handlers attached
    """
    for sh in list(log.handlers):
        log.removeHandler(sh)
        sh.close()
    log.propagate = False
    log.setLevel(min(level, INFO) if path else level)
    handlers = list()
    if path:
        if f_remove and os.path.exists(path):
            os.remove(path)
        sh = FileHandler(path)
        sh.setLevel(min(level, INFO))
        sh.setFormatter(Formatter(FILE_FORMAT))
        handlers.append(sh)
    sh = StreamHandler(stream or sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(Formatter(CONSOLE_FORMAT))
    handlers.append(sh)
    for sh in handlers:
        log.addHandler(sh)
    log.debug("setup logger level={} path={}".format(getLevelName(level), path))
    return handlers


__all__ = [
    "set_logger",
]
