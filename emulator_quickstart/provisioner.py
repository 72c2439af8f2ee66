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
"""Creates the emulator instance and database if they do not exist yet."""
import logging
from typing import Optional

from google.api_core.exceptions import GoogleAPICallError
from google.cloud import spanner
from google.cloud.spanner_admin_database_v1 import CreateDatabaseRequest
from google.cloud.spanner_admin_instance_v1 import (
    CreateInstanceRequest,
    Instance,
)

from .config import (
    DEFAULT_OPERATION_TIMEOUT,
    EMULATOR_INSTANCE_CONFIG,
    DatabaseIdentity,
    validate_resource_id,
)
from .errors import ErrorKind, error_kind

logger = logging.getLogger(__name__)

INSTANCE_DISPLAY_NAME = "Sample Instance"
INSTANCE_NODE_COUNT = 1


def create_database_statement(database_id: str) -> str:
    return f"CREATE DATABASE `{database_id}`"


class Provisioner:
    """Makes sure an instance and a database exist on the emulator.

    Both operations block until the long-running operation has finished, so
    the resource can be used as soon as the call returns. An ALREADY_EXISTS
    error means the resource is there already and is ignored; every other
    error is raised unchanged.
    """

    def __init__(
        self,
        client: spanner.Client,
        timeout: Optional[float] = DEFAULT_OPERATION_TIMEOUT,
    ) -> None:
        self._client = client
        self._timeout = timeout

    def ensure_instance(self, project_id: str, instance_id: str) -> bool:
        """Creates the instance unless it exists.

        Returns:
            True if the instance was created, False if it already existed.
        """
        validate_resource_id("project id", project_id)
        validate_resource_id("instance id", instance_id)
        project_path = f"projects/{project_id}"
        request = CreateInstanceRequest(
            parent=project_path,
            instance_id=instance_id,
            instance=Instance(
                name=f"{project_path}/instances/{instance_id}",
                config=(
                    f"{project_path}/instanceConfigs/{EMULATOR_INSTANCE_CONFIG}"
                ),
                display_name=INSTANCE_DISPLAY_NAME,
                node_count=INSTANCE_NODE_COUNT,
            ),
        )
        logger.debug("Creating instance %s", request.instance.name)
        try:
            operation = self._client.instance_admin_api.create_instance(
                request=request
            )
            operation.result(self._timeout)
        except GoogleAPICallError as e:
            if error_kind(e) is not ErrorKind.ALREADY_EXISTS:
                raise
            logger.debug("Instance %s already exists", request.instance.name)
            return False
        logger.debug("Created instance %s", request.instance.name)
        return True

    def ensure_database(self, identity: DatabaseIdentity) -> bool:
        """Creates the database unless it exists.

        The instance must exist, see :meth:`ensure_instance`.

        Returns:
            True if the database was created, False if it already existed.
        """
        request = CreateDatabaseRequest(
            parent=identity.instance_path,
            create_statement=create_database_statement(identity.database_id),
        )
        logger.debug("Creating database %s", identity.database_path)
        try:
            operation = self._client.database_admin_api.create_database(
                request=request
            )
            operation.result(self._timeout)
        except GoogleAPICallError as e:
            if error_kind(e) is not ErrorKind.ALREADY_EXISTS:
                raise
            logger.debug("Database %s already exists", identity.database_path)
            return False
        logger.debug("Created database %s", identity.database_path)
        return True
