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
"""Unit tests for the key generator."""
import uuid

from emulator_quickstart.keys import GeneratedKey, UniqueKeyGenerator


class TestUniqueKeyGenerator:
    """Test suite for UniqueKeyGenerator."""

    def test_key_is_positive_int64(self) -> None:
        generator = UniqueKeyGenerator()
        for _ in range(100):
            key = generator.next_key()
            assert 0 < key.id < 2**63

    def test_value_is_uuid_text(self) -> None:
        token = uuid.UUID("12345678-1234-5678-1234-567812345678")
        key = UniqueKeyGenerator(lambda: token).next_key()

        assert key == GeneratedKey(token.int >> 65, str(token))
        assert uuid.UUID(key.value) == token

    def test_never_repeats_a_key(self) -> None:
        first = uuid.UUID("11111111-1111-4111-8111-111111111111")
        second = uuid.UUID("22222222-2222-4222-8222-222222222222")
        tokens = iter([first, first, second])
        generator = UniqueKeyGenerator(lambda: next(tokens))

        keys = [generator.next_key(), generator.next_key()]

        assert [k.value for k in keys] == [str(first), str(second)]
        assert keys[0].id != keys[1].id

    def test_skips_zero_key(self) -> None:
        zero = uuid.UUID(int=1)
        other = uuid.UUID("33333333-3333-4333-8333-333333333333")
        tokens = iter([zero, other])

        key = UniqueKeyGenerator(lambda: next(tokens)).next_key()

        assert key.value == str(other)
