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

import binascii
import logging
from datetime import timedelta
from typing import Iterable, Iterator, Optional

from ...domain.errors import (
    BadPathEncodingError,
    LineTooLongError,
    MalformedRecordError,
    PathTooLongError,
    TooFewColumnsError,
)
from ...domain.models import Record
from ...ports.record_filter import RecordFilter
from .filters import AgeFilter, accept_all

logger = logging.getLogger(__name__)

TAB = 0x09
MAX_LINE_LENGTH = 64 * 1024
MAX_BASE64_ENCODED_PATH_LENGTH = 1024


def decoded_len(encoded_len: int) -> int:
    return encoded_len * 3 // 4


class StatsParser:
    """
    Streaming decoder for wrstat stats lines:

        <base64 path> size _ gid _ mtime ctime kind [...]

    (tab separated; columns after `kind` are ignored).

    Iterating the parser yields its single Record once per accepted line:
      - blank lines (length <= 1) are skipped and leave the record untouched
      - the active filter runs before the path is base64-decoded, so rejected
        lines never pay for decoding
      - the decoded path lands in a fixed scratch buffer reused for every line;
        `record.path` views that buffer and is overwritten by the next advance

    Any malformed line raises a MalformedRecordError subclass and ends the
    scan; there is no resynchronisation on the following line.
    """

    def __init__(
        self,
        stream: Iterable[bytes],
        *,
        max_line_length: int = MAX_LINE_LENGTH,
        max_encoded_path_length: int = MAX_BASE64_ENCODED_PATH_LENGTH,
    ) -> None:
        self._stream = stream
        self._max_line_length = int(max_line_length)
        self._max_encoded_path_length = int(max_encoded_path_length)
        self._path_buffer = bytearray(decoded_len(self._max_encoded_path_length))
        self._path_view = memoryview(self._path_buffer)
        self._filter: RecordFilter = accept_all
        self.record = Record()
        self.line_number = 0

    def set_filter(self, predicate: RecordFilter) -> None:
        self._filter = predicate

    def filter_for_files_older_than(
        self, age: timedelta, now: Optional[float] = None
    ) -> None:
        """Only yield regular files whose min(mtime, ctime) is at least `age` ago."""
        age_filter = AgeFilter(age, now=now)
        logger.debug("StatsParser: filtering with %r", age_filter)
        self.set_filter(age_filter)

    def __iter__(self) -> Iterator[Record]:
        for raw in self._stream:
            self.line_number += 1
            line = raw.rstrip(b"\r\n")

            if len(line) <= 1:
                continue

            if len(line) > self._max_line_length:
                raise LineTooLongError(
                    f"line longer than {self._max_line_length} bytes", self.line_number
                )

            if self._decode(line):
                yield self.record

    def _decode(self, line: bytes) -> bool:
        """Fill self.record from `line`; False if the filter rejected it."""
        rec = self.record
        n = self.line_number

        path_end = self._column_end(line, 0)
        size_end = self._column_end(line, path_end + 1)
        rec.size = self._uint(line, path_end + 1, size_end)

        gid_start = self._column_end(line, size_end + 1) + 1
        gid_end = self._column_end(line, gid_start)
        rec.gid = self._uint(line, gid_start, gid_end)

        mtime_start = self._column_end(line, gid_end + 1) + 1
        mtime_end = self._column_end(line, mtime_start)
        rec.mtime = self._uint(line, mtime_start, mtime_end)

        ctime_end = self._column_end(line, mtime_end + 1)
        rec.ctime = self._uint(line, mtime_end + 1, ctime_end)

        kind_at = ctime_end + 1
        if kind_at >= len(line):
            raise TooFewColumnsError(n)
        rec.kind = line[kind_at : kind_at + 1]

        if not self._filter(rec):
            return False

        rec.path = self._decode_path(line, path_end)
        return True

    def _column_end(self, line: bytes, start: int) -> int:
        end = line.find(TAB, start)
        if end == -1:
            raise TooFewColumnsError(self.line_number)
        return end

    def _uint(self, line: bytes, start: int, end: int) -> int:
        digits = line[start:end]
        if not digits.isdigit():
            raise MalformedRecordError(
                f"invalid unsigned integer {digits!r}", self.line_number
            )
        return int(digits)

    def _decode_path(self, line: bytes, path_end: int) -> memoryview:
        if path_end > self._max_encoded_path_length:
            raise PathTooLongError(
                f"encoded path longer than {self._max_encoded_path_length} bytes",
                self.line_number,
            )

        try:
            decoded = binascii.a2b_base64(line[:path_end], strict_mode=True)
        except binascii.Error as e:
            raise BadPathEncodingError(
                f"bad path encoding: {e}", self.line_number
            ) from e

        # a2b_base64 cannot decode in place; the buffer holds a copy of its result
        size = len(decoded)
        self._path_buffer[:size] = decoded
        return self._path_view[:size]
