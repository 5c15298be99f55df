# Licensed under the Apache License, Version 2.0
from __future__ import annotations

import time
from datetime import timedelta
from typing import Optional

from ...domain.models import Record

DAYS_PER_YEAR = 365


def years(n: int) -> timedelta:
    """Age in whole years, where a year is 365 days."""
    return timedelta(days=DAYS_PER_YEAR * n)


def accept_all(record: Record) -> bool:
    return True


class AgeFilter:
    """
    Accepts regular files whose oldest timestamp is at least `age` old, i.e.
    min(mtime, ctime) <= now - age.

    The cutoff is fixed at construction.
    """

    def __init__(self, age: timedelta, now: Optional[float] = None) -> None:
        if now is None:
            now = time.time()
        self.cutoff = int(now) - int(age.total_seconds())

    def __call__(self, record: Record) -> bool:
        if not record.is_file:
            return False
        return min(record.mtime, record.ctime) <= self.cutoff

    def __repr__(self) -> str:
        return f"AgeFilter(cutoff={self.cutoff})"
