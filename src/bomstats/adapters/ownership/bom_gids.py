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
from pathlib import Path
from typing import Iterable

from ...domain.errors import InvalidOwnershipTableError, UnknownOwnershipGroupError
from ...ports.ownership import OwnershipPort

logger = logging.getLogger(__name__)

NUM_COLUMNS = 2


class BomGidsTable(OwnershipPort):
    """
    GID -> BoM lookup loaded from a bom.gids file:

        bom1<TAB>gid1,gid2
        bom2<TAB>gid3,gid4,gid5

    - spaces inside a BoM name are removed ("Human Genetics" -> "HumanGenetics")
    - a GID listed on several lines belongs to the last one
    - any malformed line makes the whole table unusable
    """

    def __init__(self, gid_to_label: dict[int, str]) -> None:
        self._gid_to_label = dict(gid_to_label)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> BomGidsTable:
        gid_to_label: dict[int, str] = {}

        for n, raw in enumerate(lines, start=1):
            line = raw.strip()
            cols = line.split("\t")
            if len(cols) != NUM_COLUMNS:
                raise InvalidOwnershipTableError(repr(line), n)

            label = cols[0].replace(" ", "")
            for gid_str in cols[1].split(","):
                if not (gid_str.isascii() and gid_str.isdigit()):
                    raise InvalidOwnershipTableError(f"bad GID {gid_str!r}", n)
                gid_to_label[int(gid_str)] = label

        return cls(gid_to_label)

    @classmethod
    def from_path(cls, path: str | Path) -> BomGidsTable:
        try:
            with open(path, "r", encoding="utf-8") as fh:
                table = cls.from_lines(fh)
        except UnicodeDecodeError as e:
            raise InvalidOwnershipTableError(f"{path} is not UTF-8 text: {e}") from e
        logger.debug(
            "BomGidsTable: loaded %d GIDs in %d BoMs from %s",
            len(table),
            len(table.labels()),
            path,
        )
        return table

    def label_for(self, gid: int) -> str:
        try:
            return self._gid_to_label[gid]
        except KeyError:
            raise UnknownOwnershipGroupError(gid) from None

    def labels(self) -> set[str]:
        return set(self._gid_to_label.values())

    def __len__(self) -> int:
        return len(self._gid_to_label)
