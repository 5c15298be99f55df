# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator

from ..domain.models import ROOT_DIRECTORY, Record, Stats
from ..ports.ownership import OwnershipPort

logger = logging.getLogger(__name__)

SEP = b"/"

# (label, directory bytes) -> [count, size]
DirTotals = dict[tuple[str, bytes], list[int]]


def ancestor_directories(path: bytes) -> Iterator[bytes]:
    """
    Yield every directory containing `path`, root first, leaf name excluded.

    The root comes out as b"". Repeated separators do not produce empty
    components, so b"/a//b/f" gives b"", b"/a", b"/a//b".
    """
    prev = -1
    i = path.find(SEP)
    while i != -1:
        if i == 0 or i != prev + 1:
            yield path[:i]
        prev = i
        i = path.find(SEP, i + 1)


def directory_name(directory: bytes) -> str:
    if not directory:
        return ROOT_DIRECTORY
    return os.fsdecode(directory)


def sort_key(s: Stats) -> tuple[int, int, str, str]:
    return (-s.size, s.depth, s.directory, s.label)


def sort_stats(stats: Iterable[Stats]) -> list[Stats]:
    """
    Order for reporting: biggest first; on equal size, shallower directories
    first; then by directory name, then by label.
    """
    return sorted(stats, key=sort_key)


class DirectoryStatsService:
    """
    Turns a stream of records into per-(BoM, directory) count and size totals.

    Notes:
      - Every record adds to the totals of all of its ancestor directories, so a
        directory's totals always cover everything beneath it.
      - Totals live in one dict per `aggregate` call; nothing is shared between
        runs.
      - A GID missing from the ownership table aborts the run: an unmapped group
        would otherwise silently undercount a BoM.
    """

    def __init__(self, ownership: OwnershipPort) -> None:
        self._ownership = ownership

    def aggregate(self, records: Iterable[Record]) -> list[Stats]:
        """
        Consume `records` and return sorted Stats.

        Raises:
            UnknownOwnershipGroupError: for a record whose GID has no BoM.
            MalformedRecordError: passed through from the record source.
        """
        totals: DirTotals = {}

        for record in records:
            label = self._ownership.label_for(record.gid)
            accumulate(totals, label, record.path_bytes(), record.size)

        stats = [
            Stats(label, directory_name(d), count, size)
            for (label, d), (count, size) in totals.items()
        ]
        logger.debug("DirectoryStatsService: %d (bom, directory) entries", len(stats))

        return sort_stats(stats)


def accumulate(totals: DirTotals, label: str, path: bytes, size: int) -> None:
    for directory in ancestor_directories(path):
        key = (label, directory)
        entry = totals.get(key)
        if entry is None:
            totals[key] = [1, size]
        else:
            entry[0] += 1
            entry[1] += size
