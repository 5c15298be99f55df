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

import os
from dataclasses import dataclass, field, replace

FILE_KIND = b"f"
ROOT_DIRECTORY = "/"


@dataclass(slots=True)
class Record:
    """
    One decoded stats line.

    A parser owns a single Record and overwrites it on every advance, so the
    object handed out by iteration is only valid until the next one:
      - `path` is a view over the parser's scratch buffer and changes under you
      - use `path_bytes()` or `detach()` to keep anything past the next line
    """

    path: memoryview = field(default_factory=lambda: memoryview(b""))
    size: int = 0
    gid: int = 0
    mtime: int = 0
    ctime: int = 0
    kind: bytes = b""

    def path_bytes(self) -> bytes:
        """Owned copy of the decoded path."""
        return self.path.tobytes()

    def path_str(self) -> str:
        return os.fsdecode(self.path.tobytes())

    def detach(self) -> Record:
        """Return a copy that no longer aliases the parser's buffer."""
        return replace(self, path=memoryview(self.path.tobytes()))

    @property
    def is_file(self) -> bool:
        return self.kind == FILE_KIND


@dataclass(frozen=True, slots=True)
class Stats:
    """Count and total size of records at or below `directory` for one BoM."""

    label: str
    directory: str
    count: int
    size: int

    @property
    def depth(self) -> int:
        if self.directory == ROOT_DIRECTORY:
            return 0
        return self.directory.count("/")
