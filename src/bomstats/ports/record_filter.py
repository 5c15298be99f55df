# Licensed under the Apache License, Version 2.0
from __future__ import annotations

from typing import Protocol

from ..domain.models import Record


class RecordFilter(Protocol):
    """
    Predicate over a just-parsed record.
    Called before the path is decoded, so `record.path` still holds the
    previous line's path and must not be inspected.
    """

    def __call__(self, record: Record) -> bool: ...
