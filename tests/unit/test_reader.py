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
"""Unit tests for the reader."""
import datetime
import io
from unittest.mock import MagicMock, Mock

import pytest

from emulator_quickstart.config import DatabaseIdentity
from emulator_quickstart.connection import Connection
from emulator_quickstart.emulator import ServiceEndpoint
from emulator_quickstart.errors import QuickstartError
from emulator_quickstart.reader import SELECT_SQL, Row, query

TS_1 = datetime.datetime(2026, 10, 19, 12, 0, 0, tzinfo=datetime.timezone.utc)
TS_2 = datetime.datetime(2026, 10, 19, 12, 0, 5, tzinfo=datetime.timezone.utc)


class TestRow:
    """Test suite for Row."""

    def test_accessors(self) -> None:
        row = Row(["abc", TS_1])

        assert row.value == "abc"
        assert row.ts == TS_1
        assert row.get_string(0) == "abc"
        assert row.get_timestamp(1) == TS_1
        assert row.values == ("abc", TS_1)
        assert len(row) == 2

    def test_format(self) -> None:
        assert (
            Row(["abc", TS_1]).format()
            == "Row abc inserted at 2026-10-19 12:00:00+00:00"
        )

    def test_wrong_type(self) -> None:
        row = Row([1, "not a timestamp"])
        with pytest.raises(QuickstartError):
            row.get_string(0)
        with pytest.raises(QuickstartError):
            row.get_timestamp(1)

    def test_equality(self) -> None:
        assert Row(["a", TS_1]) == Row(("a", TS_1))
        assert Row(["a", TS_1]) != Row(["b", TS_1])


class TestQuery:
    """Test suite for query."""

    # -------------------------------------------------------------------------
    # Fixtures
    # -------------------------------------------------------------------------

    @pytest.fixture
    def snapshot(self):
        snapshot = Mock()
        snapshot.execute_sql.return_value = iter([["b", TS_2], ["a", TS_1]])
        return snapshot

    @pytest.fixture
    def snapshot_ctx(self, snapshot):
        """Mocks the context manager returned by Database.snapshot()."""
        ctx = MagicMock()
        ctx.__enter__.return_value = snapshot
        ctx.__exit__.return_value = False
        return ctx

    @pytest.fixture
    def connection(self, snapshot_ctx):
        client = Mock()
        database = client.instance.return_value.database.return_value
        database.snapshot.return_value = snapshot_ctx
        conn = Connection(
            DatabaseIdentity("p1", "i1", "d1"),
            ServiceEndpoint("localhost", 9010),
            client,
        )
        yield conn
        conn.close()

    # -------------------------------------------------------------------------
    # Test Methods
    # -------------------------------------------------------------------------

    def test_select_sql(self) -> None:
        assert SELECT_SQL == "select value, ts from test order by ts desc"

    def test_rows_in_result_order(self, connection, snapshot) -> None:
        out = io.StringIO()

        rows = list(query(connection, out=out))

        snapshot.execute_sql.assert_called_once_with(SELECT_SQL)
        assert [row.value for row in rows] == ["b", "a"]
        assert out.getvalue() == (
            "Row b inserted at 2026-10-19 12:00:05+00:00\n"
            "Row a inserted at 2026-10-19 12:00:00+00:00\n"
        )

    def test_query_is_lazy(self, connection, snapshot, snapshot_ctx) -> None:
        """Test that rows are fetched and printed only when consumed."""
        out = io.StringIO()

        rows = query(connection, out=out)
        snapshot.execute_sql.assert_not_called()

        first = next(rows)
        assert first.value == "b"
        assert out.getvalue() == "Row b inserted at 2026-10-19 12:00:05+00:00\n"
        snapshot_ctx.__exit__.assert_not_called()

        assert [row.value for row in rows] == ["a"]
        snapshot_ctx.__exit__.assert_called_once()

    def test_query_is_single_pass(self, connection) -> None:
        rows = query(connection, out=io.StringIO())

        assert len(list(rows)) == 2
        assert list(rows) == []

    def test_snapshot_released_when_closed_early(
        self, connection, snapshot_ctx
    ) -> None:
        rows = query(connection, out=io.StringIO())
        next(rows)
        rows.close()

        snapshot_ctx.__exit__.assert_called_once()

    def test_default_output_is_stdout(self, connection, capsys) -> None:
        list(query(connection))

        assert capsys.readouterr().out.splitlines() == [
            "Row b inserted at 2026-10-19 12:00:05+00:00",
            "Row a inserted at 2026-10-19 12:00:00+00:00",
        ]

    def test_closed_connection(self, connection) -> None:
        connection.close()
        with pytest.raises(QuickstartError):
            next(query(connection, out=io.StringIO()))
