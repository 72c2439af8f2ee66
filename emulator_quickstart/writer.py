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
"""Creates the sample table and writes rows to it in read/write
transactions."""
from dataclasses import dataclass
import logging
from typing import Optional

from google.api_core.exceptions import GoogleAPICallError
from google.cloud import spanner

from .config import DEFAULT_OPERATION_TIMEOUT
from .connection import Connection
from .errors import ErrorKind, error_kind
from .keys import GeneratedKey, UniqueKeyGenerator

logger = logging.getLogger(__name__)

TABLE_NAME = "test"
COLUMNS = ("id", "value", "ts")

CREATE_TABLE_DDL = (
    "create table if not exists test "
    "(id int64, "
    "value string(max), "
    "ts timestamp options (allow_commit_timestamp=true)) "
    "primary key (id)"
)

DEFAULT_MAX_KEY_ATTEMPTS = 3


@dataclass(frozen=True)
class InsertedRow:
    """A committed row. ``ts`` is assigned by Spanner at commit time."""

    id: int
    value: str


def ensure_table(
    connection: Connection,
    timeout: Optional[float] = DEFAULT_OPERATION_TIMEOUT,
) -> None:
    """Creates the sample table. Safe to call on every run."""
    connection.execute_ddl([CREATE_TABLE_DDL], timeout=timeout)


def _insert(transaction, key: GeneratedKey) -> None:
    # Builds the whole mutation on every call, so a retried attempt
    # starts from scratch.
    transaction.insert(
        TABLE_NAME,
        columns=COLUMNS,
        values=[(key.id, key.value, spanner.COMMIT_TIMESTAMP)],
    )


def insert_row(
    connection: Connection,
    keys: Optional[UniqueKeyGenerator] = None,
    max_key_attempts: int = DEFAULT_MAX_KEY_ATTEMPTS,
    timeout_secs: Optional[float] = None,
) -> InsertedRow:
    """Inserts one row with a fresh key and the commit timestamp.

    The insert runs in a read/write transaction that the client library
    retries when Spanner aborts it. If the key collides with an existing
    row, a new key is drawn, at most ``max_key_attempts`` times.

    Args:
        connection: An open connection.
        keys: The key generator. A new one is used if not given.
        max_key_attempts: How many keys to try before giving up.
        timeout_secs: Overall deadline for the transaction retries. Uses
            the client library default if not given.

    Returns:
        The inserted row.
    """
    if max_key_attempts < 1:
        raise ValueError("max_key_attempts must be at least 1")
    if keys is None:
        keys = UniqueKeyGenerator()
    txn_kwargs = {}
    if timeout_secs is not None:
        txn_kwargs["timeout_secs"] = timeout_secs

    for attempt in range(1, max_key_attempts + 1):
        key = keys.next_key()
        logger.debug("Inserting row with id %d", key.id)
        try:
            connection.run_in_transaction(_insert, key, **txn_kwargs)
        except GoogleAPICallError as e:
            if (
                error_kind(e) is not ErrorKind.ALREADY_EXISTS
                or attempt == max_key_attempts
            ):
                raise
            logger.warning("Key %d already in use, drawing a new key", key.id)
            continue
        return InsertedRow(key.id, key.value)
