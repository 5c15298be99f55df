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

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable

from ..domain.models import Stats


class ReportWriterPort(ABC):
    """Abstract interface for serialising sorted stats."""

    @abstractmethod
    def write(self, stats: Iterable[Stats]) -> list[Path]:
        """Write the stats in the order given; return the files written."""
        raise NotImplementedError
