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
"""Module for the Connection class
representing a scoped connection to one emulator database."""
import logging
from typing import Any, Callable, Iterable, Optional

from google.auth.credentials import AnonymousCredentials
from google.cloud import spanner
from google.cloud.spanner_v1.database import Database

from .config import DEFAULT_OPERATION_TIMEOUT, DatabaseIdentity
from .emulator import ServiceEndpoint
from .errors import QuickstartError

logger = logging.getLogger(__name__)


def create_client(project_id: str, endpoint: ServiceEndpoint) -> spanner.Client:
    """Creates a Spanner client that talks to the emulator at ``endpoint``.

    Anonymous credentials together with an explicit API endpoint make the
    client open a plain-text channel to that endpoint, so the client does
    not depend on SPANNER_EMULATOR_HOST being set.
    """
    logger.debug(
        "Creating client for project %s on %s", project_id, endpoint.address
    )
    return spanner.Client(
        project=project_id,
        credentials=AnonymousCredentials(),
        client_options=endpoint.client_options(),
    )


def close_client(client: spanner.Client, *apis: Any) -> None:
    """Closes the gRPC transports of ``apis`` and then ``client`` itself.

    ``spanner.Client.close()`` alone does not close any gRPC channel, so the
    API clients that were used must be passed in. The client is closed also
    when closing a transport fails.
    """
    try:
        for api in apis:
            api.transport.close()
    finally:
        client.close()


class Connection:
    """A connection to a single database on the emulator.

    The connection owns its client and releases the database sessions and
    the gRPC channels of that client on :meth:`close`. It
    implements the context manager protocol so that it is always released,
    also when the block raises.
    """

    def __init__(
        self,
        identity: DatabaseIdentity,
        endpoint: ServiceEndpoint,
        client: spanner.Client,
    ) -> None:
        self._identity = identity
        self._endpoint = endpoint
        self._client = client
        self._database = client.instance(identity.instance_id).database(
            identity.database_id
        )
        self._closed = False

    @property
    def identity(self) -> DatabaseIdentity:
        return self._identity

    @property
    def endpoint(self) -> ServiceEndpoint:
        return self._endpoint

    @property
    def client(self) -> spanner.Client:
        return self._client

    @property
    def database(self) -> Database:
        self._check_not_closed()
        return self._database

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_not_closed(self) -> None:
        if self._closed:
            raise QuickstartError("Connection is closed.")

    def execute_ddl(
        self,
        statements: Iterable[str],
        timeout: Optional[float] = DEFAULT_OPERATION_TIMEOUT,
    ) -> None:
        """Executes DDL statements and waits for them to be applied."""
        self._check_not_closed()
        statements = list(statements)
        logger.debug(
            "Executing %d DDL statement(s) on %s",
            len(statements),
            self._identity.database_path,
        )
        operation = self._database.update_ddl(statements)
        operation.result(timeout)

    def run_in_transaction(
        self, func: Callable[..., Any], *args, **kwargs
    ) -> Any:
        """Runs ``func`` in a read/write transaction.

        The transaction is retried as a whole when Spanner aborts it, so
        ``func`` may be called more than once and must not have side effects
        outside the transaction it receives.

        Returns:
            The return value of the successful call of ``func``.
        """
        self._check_not_closed()
        return self._database.run_in_transaction(func, *args, **kwargs)

    def snapshot(self, **kwargs):
        """Returns a context manager for a read-only snapshot."""
        self._check_not_closed()
        return self._database.snapshot(**kwargs)

    def close(self) -> None:
        """Closes the connection. Closing twice is a no-op."""
        if self._closed:
            return
        logger.debug("Closing connection to %s", self._identity.database_path)
        try:
            try:
                self._database.close()
            finally:
                close_client(
                    self._client,
                    self._database.spanner_api,
                    self._client.database_admin_api,
                )
        except Exception:
            logger.exception(
                "Error closing connection to %s", self._identity.database_path
            )
            raise
        finally:
            self._closed = True

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def connect(
    identity: DatabaseIdentity,
    endpoint: ServiceEndpoint,
    client: Optional[spanner.Client] = None,
) -> Connection:
    """Opens a connection to the database ``identity`` on ``endpoint``."""
    if client is None:
        client = create_client(identity.project_id, endpoint)
    logger.debug(
        "Connecting to %s on %s", identity.database_path, endpoint.address
    )
    return Connection(identity, endpoint, client)
