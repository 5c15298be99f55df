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

from typing import Optional


class BomStatsError(Exception):
    """Base exception for domain-specific errors."""


class MalformedRecordError(BomStatsError):
    """A stats line that cannot be decoded. Fatal for the scan."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class TooFewColumnsError(MalformedRecordError):
    """The line ended before the entry-kind column."""

    def __init__(self, line_number: Optional[int] = None) -> None:
        super().__init__("too few columns", line_number)


class BadPathEncodingError(MalformedRecordError):
    """The path column is not valid base64."""


class PathTooLongError(BadPathEncodingError):
    """The encoded path does not fit the decoder's scratch buffer."""


class LineTooLongError(MalformedRecordError):
    """The line exceeds the parser's maximum line length."""


class UnknownOwnershipGroupError(BomStatsError):
    """A GID that does not belong to any BoM."""

    def __init__(self, gid: int) -> None:
        self.gid = gid
        super().__init__(f"invalid GID {gid}: GID does not belong to any BoMs")


class InvalidOwnershipTableError(BomStatsError):
    """Unusable bom.gids data (wrong column count, non-numeric GID)."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"invalid bom.gids line {line_number}: {message}"
        super().__init__(message)
