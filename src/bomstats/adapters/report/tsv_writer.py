# Licensed under the Apache License, Version 2.0
from __future__ import annotations

import logging
from contextlib import ExitStack
from pathlib import Path
from typing import IO, Iterable, Optional, Union

from ...domain.models import Stats
from ...ports.report import ReportWriterPort

logger = logging.getLogger(__name__)

GIB = 1 << 30


def format_size(size: int, human: bool = False) -> str:
    """Raw bytes, or GiB to two decimals when `human` is set."""
    if human:
        return f"{size / GIB:.2f}"
    return str(size)


class TsvReportWriter(ReportWriterPort):
    """
    Writes one TSV per BoM, one line per directory:

        <directory>\t<count>\t<size>

    Files are named `<prefix>.<bom>.tsv`, or `<bom>.tsv` in the working
    directory when there is no prefix. Lines keep the order they are given in.
    """

    def __init__(
        self, prefix: Optional[Union[str, Path]] = None, *, human: bool = False
    ) -> None:
        self._prefix = None if prefix is None else Path(prefix)
        self._human = bool(human)

    def path_for(self, label: str) -> Path:
        if self._prefix is None:
            return Path(f"{label}.tsv")
        return Path(f"{self._prefix}.{label}.tsv")

    def write(self, stats: Iterable[Stats]) -> list[Path]:
        written: list[Path] = []
        files: dict[str, IO[str]] = {}

        with ExitStack() as stack:
            for s in stats:
                fh = files.get(s.label)
                if fh is None:
                    out = self.path_for(s.label)
                    out.parent.mkdir(parents=True, exist_ok=True)
                    fh = stack.enter_context(
                        open(out, "w", encoding="utf-8", errors="surrogateescape")
                    )
                    files[s.label] = fh
                    written.append(out)

                fh.write(
                    f"{s.directory}\t{s.count}\t{format_size(s.size, self._human)}\n"
                )

        logger.debug("TsvReportWriter: wrote %d file(s)", len(written))
        return written
