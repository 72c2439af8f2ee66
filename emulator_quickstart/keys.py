#  Copyright 2026 Google LLC
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
"""Primary key generation for inserted rows."""
from dataclasses import dataclass
from typing import Callable, Optional
import uuid

_INT64_BITS = 63


@dataclass(frozen=True)
class GeneratedKey:
    """A primary key and the text it was derived from."""

    id: int
    value: str


class UniqueKeyGenerator:
    """Generates positive INT64 keys from random UUIDs.

    The key is the upper 63 bits of a UUID4, and the row value is the UUID
    text. Keys already issued by this generator are never issued again.
    """

    def __init__(self, uuid_factory: Optional[Callable[[], uuid.UUID]] = None):
        self._uuid_factory = uuid_factory or uuid.uuid4
        self._issued: set[int] = set()

    def next_key(self) -> GeneratedKey:
        while True:
            token = self._uuid_factory()
            key = token.int >> (128 - _INT64_BITS)
            if key and key not in self._issued:
                self._issued.add(key)
                return GeneratedKey(key, str(token))
