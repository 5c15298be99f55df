# Licensed under the Apache License, Version 2.0
from __future__ import annotations

import gzip
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Union

logger = logging.getLogger(__name__)

STDIN = "-"
GZIP_SUFFIX = ".gz"


@contextmanager
def open_stats(path: Union[str, Path]) -> Iterator[BinaryIO]:
    """
    Open a stats dump for line-by-line binary reading.

    `-` is standard input (never closed here); `*.gz` is decompressed on the
    fly; anything else is read as-is.
    """
    if str(path) == STDIN:
        yield sys.stdin.buffer
        return

    p = Path(path)
    if p.suffix == GZIP_SUFFIX:
        logger.debug("open_stats: gzip stream %s", p)
        with gzip.open(p, "rb") as fh:
            yield fh  # type: ignore[misc]
        return

    logger.debug("open_stats: plain stream %s", p)
    with open(p, "rb") as fh:
        yield fh
