import logging
import os
from pathlib import Path


class LevelPadFormatter(logging.Formatter):
    LEVEL_WIDTH = len("WARNING")

    def format(self, record):
        level = record.levelname
        pad = " " * (self.LEVEL_WIDTH - len(level))
        record.padded = f"[{level}]{pad}"
        record.unpadded = f"[{level}]"
        return super().format(record)


def configure(debug: bool, name: str, logfile: Path) -> logging.Logger:
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Logs go only to the file, stdout carries the status line
    logger.propagate = False

    # Do not add handlers twice
    for existing in list(logger.handlers):
        if isinstance(existing, logging.FileHandler):
            if existing.baseFilename == os.path.abspath(logfile):
                existing.setLevel(level)
                return logger
            logger.removeHandler(existing)
            existing.close()

    handler = logging.FileHandler(logfile, mode="a", encoding="utf-8")
    handler.setLevel(level)
    formatter = LevelPadFormatter(
        f"%(asctime)s %(unpadded)s {name}.%(funcName)s - %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
