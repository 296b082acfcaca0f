import logging
import os
from logging import Logger
from typing import Optional

DEFAULT_NOISY_LIBS = {
    "httpx": logging.WARNING,
    "openai": logging.WARNING,
    "urllib3": logging.WARNING,
}


def setup_logging(noisy_libs: Optional[dict[str, int]] = None):
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        handlers=[handler],
        force=True,
    )

    for lib, level in (DEFAULT_NOISY_LIBS if noisy_libs is None else noisy_libs).items():
        logging.getLogger(lib).setLevel(level)


class Logger:
    @staticmethod
    def get_logger(name: Optional[str] = None) -> Logger:
        return logging.getLogger(name)
