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


class OwnershipPort(ABC):
    """Abstract interface for resolving a GID to its BoM label."""

    @abstractmethod
    def label_for(self, gid: int) -> str:
        """
        Return the label the GID belongs to.

        Raises:
            UnknownOwnershipGroupError: if the GID is not mapped.
        """
        raise NotImplementedError
