# Licensed under the Apache License, Version 2.0
import logging
import os
import sys

LOG_LEVEL_ENV = "BOMSTATS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging() -> None:
    # stdout is reserved for command output (paths written, record counts)
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def enable_verbose() -> None:
    logging.getLogger().setLevel(logging.DEBUG)
