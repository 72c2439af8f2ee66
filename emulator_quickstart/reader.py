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
"""Reads rows back from the sample table."""
import datetime
import logging
import sys
from typing import Any, Iterator, Optional, Sequence, TextIO

from .connection import Connection
from .errors import QuickstartError

logger = logging.getLogger(__name__)

SELECT_SQL = "select value, ts from test order by ts desc"


class Row:
    """A row returned by :func:`query`.

    The query selects ``value`` and ``ts`` in that order; other columns can
    be read with the typed accessors.
    """

    def __init__(self, values: Sequence[Any]) -> None:
        self._values = tuple(values)

    def __repr__(self) -> str:
        return f"Row{self._values!r}"

    def __eq__(self, other) -> bool:
        return isinstance(other, Row) and self._values == other._values

    def __len__(self) -> int:
        return len(self._values)

    @property
    def values(self) -> tuple:
        return self._values

    def get_string(self, index: int) -> str:
        value = self._values[index]
        if not isinstance(value, str):
            raise QuickstartError(
                f"Column {index} is not a string: {type(value).__name__}"
            )
        return value

    def get_timestamp(self, index: int) -> datetime.datetime:
        value = self._values[index]
        if not isinstance(value, datetime.datetime):
            raise QuickstartError(
                f"Column {index} is not a timestamp: {type(value).__name__}"
            )
        return value

    @property
    def value(self) -> str:
        return self.get_string(0)

    @property
    def ts(self) -> datetime.datetime:
        return self.get_timestamp(1)

    def format(self) -> str:
        return f"Row {self.value} inserted at {self.ts}"


def query(
    connection: Connection,
    sql: str = SELECT_SQL,
    out: Optional[TextIO] = None,
) -> Iterator[Row]:
    """Runs ``sql`` in a read-only snapshot and yields the rows.

    Each row is written to ``out`` (stdout by default) when it is consumed.
    The result can be iterated once; run the query again for a second pass.
    """
    logger.debug("Executing query: %s", sql)
    with connection.snapshot() as snapshot:
        for values in snapshot.execute_sql(sql):
            row = Row(values)
            print(row.format(), file=out or sys.stdout)
            yield row
