# Licensed under the Apache License, Version 2.0
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from ..domain.models import Record
from ..ports.report import ReportWriterPort
from .dirstats_service import DirectoryStatsService

logger = logging.getLogger(__name__)


class ReportService:
    """
    Aggregates records and hands the sorted stats to a report writer.

    The writer is only called once aggregation has finished, so a run that
    fails part-way (bad line, unknown GID) leaves no report files behind.
    """

    def __init__(self, dirstats: DirectoryStatsService, writer: ReportWriterPort) -> None:
        self._dirstats = dirstats
        self._writer = writer

    def write_report(self, records: Iterable[Record]) -> list[Path]:
        stats = self._dirstats.aggregate(records)
        written = self._writer.write(stats)
        for path in written:
            logger.debug("ReportService: wrote %s", path)
        return written
