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
"""Runs the quickstart: start the emulator, provision, write and read."""
import logging
import os
import sys
from typing import Optional, TextIO

from .config import Settings
from .connection import close_client, connect, create_client
from .emulator import EmulatorLauncher, ServiceEndpoint
from .keys import UniqueKeyGenerator
from .provisioner import Provisioner
from .reader import SELECT_SQL, Row, query
from .writer import ensure_table, insert_row

logger = logging.getLogger(__name__)


def provision(settings: Settings, endpoint: ServiceEndpoint) -> None:
    """Creates the instance and then the database, if absent."""
    identity = settings.identity
    client = create_client(identity.project_id, endpoint)
    try:
        provisioner = Provisioner(client, timeout=settings.operation_timeout)
        provisioner.ensure_instance(identity.project_id, identity.instance_id)
        provisioner.ensure_database(identity)
    finally:
        close_client(
            client, client.instance_admin_api, client.database_admin_api
        )


def write_and_read(
    settings: Settings,
    endpoint: ServiceEndpoint,
    out: Optional[TextIO] = None,
    keys: Optional[UniqueKeyGenerator] = None,
) -> list[Row]:
    """Creates the table, inserts one row and reads all rows back."""
    with connect(settings.identity, endpoint) as connection:
        ensure_table(connection, timeout=settings.operation_timeout)
        inserted = insert_row(connection, keys)
        logger.debug(
            "Inserted row %d with value %s", inserted.id, inserted.value
        )
        return list(query(connection, SELECT_SQL, out))


def run_quickstart(
    settings: Optional[Settings] = None,
    out: Optional[TextIO] = None,
    keys: Optional[UniqueKeyGenerator] = None,
) -> list[Row]:
    """Runs the complete quickstart and returns the rows that were read.

    A new emulator container is started unless ``settings.emulator_host``
    points at a running emulator. A container started here is always
    stopped again. Its address is exported as SPANNER_EMULATOR_HOST so
    that other tools in this process find the emulator.
    """
    if settings is None:
        settings = Settings.from_env()

    if settings.emulator_host:
        logger.debug("Using running emulator at %s", settings.emulator_host)
        endpoint = ServiceEndpoint.parse(settings.emulator_host)
        provision(settings, endpoint)
        return write_and_read(settings, endpoint, out, keys)

    with EmulatorLauncher(settings) as endpoint:
        endpoint.export_environment()
        provision(settings, endpoint)
        return write_and_read(settings, endpoint, out, keys)


def main() -> None:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING").upper())
    run_quickstart(out=sys.stdout)
