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
"""Configuration for the quickstart.

Values are read from the environment, following the variable names used by
the Spanner client libraries and their system tests.
"""
from dataclasses import dataclass
import os
import re
from typing import Mapping, Optional

DEFAULT_PROJECT_ID = "sample-project"
DEFAULT_INSTANCE_ID = "sample-instance"
DEFAULT_DATABASE_ID = "sample-database"

EMULATOR_IMAGE = "gcr.io/cloud-spanner-emulator/emulator"
EMULATOR_GRPC_PORT = 9010
EMULATOR_TIMEZONE = "America/Chicago"
EMULATOR_INSTANCE_CONFIG = "emulator-config"

DEFAULT_OPERATION_TIMEOUT = 300.0
DEFAULT_STARTUP_TIMEOUT = 120.0

_RESOURCE_ID = re.compile(r"^[a-z][a-z0-9_\-]*[a-z0-9]$")


def validate_resource_id(kind: str, value: str) -> str:
    """Checks that ``value`` can be used as one segment of a resource name.

    Raises:
        ValueError: If the identifier is empty or malformed.
    """
    if not value:
        raise ValueError(f"{kind} must not be empty")
    if not _RESOURCE_ID.match(value):
        raise ValueError(f"Invalid {kind}: {value!r}")
    return value


@dataclass(frozen=True)
class DatabaseIdentity:
    """Fully qualifies a database as (project, instance, database)."""

    project_id: str
    instance_id: str
    database_id: str

    def __post_init__(self):
        validate_resource_id("project id", self.project_id)
        validate_resource_id("instance id", self.instance_id)
        validate_resource_id("database id", self.database_id)

    @property
    def project_path(self) -> str:
        return f"projects/{self.project_id}"

    @property
    def instance_path(self) -> str:
        return f"{self.project_path}/instances/{self.instance_id}"

    @property
    def database_path(self) -> str:
        return f"{self.instance_path}/databases/{self.database_id}"

    @property
    def instance_config_path(self) -> str:
        return f"{self.project_path}/instanceConfigs/{EMULATOR_INSTANCE_CONFIG}"


@dataclass(frozen=True)
class Settings:
    """Settings for one quickstart run."""

    project_id: str = DEFAULT_PROJECT_ID
    instance_id: str = DEFAULT_INSTANCE_ID
    database_id: str = DEFAULT_DATABASE_ID
    emulator_host: Optional[str] = None
    emulator_image: str = EMULATOR_IMAGE
    emulator_timezone: str = EMULATOR_TIMEZONE
    operation_timeout: float = DEFAULT_OPERATION_TIMEOUT
    startup_timeout: float = DEFAULT_STARTUP_TIMEOUT

    @property
    def identity(self) -> DatabaseIdentity:
        return DatabaseIdentity(
            self.project_id, self.instance_id, self.database_id
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None):
        """Builds settings from environment variables.

        Args:
            environ: The mapping to read from. Defaults to ``os.environ``.
        """
        if environ is None:
            environ = os.environ
        return cls(
            project_id=environ.get("SPANNER_PROJECT_ID", DEFAULT_PROJECT_ID),
            instance_id=environ.get("SPANNER_INSTANCE_ID", DEFAULT_INSTANCE_ID),
            database_id=environ.get("SPANNER_DATABASE_ID", DEFAULT_DATABASE_ID),
            emulator_host=environ.get("SPANNER_EMULATOR_HOST") or None,
            emulator_image=environ.get(
                "SPANNER_EMULATOR_IMAGE", EMULATOR_IMAGE
            ),
            emulator_timezone=environ.get(
                "SPANNER_EMULATOR_TZ", EMULATOR_TIMEZONE
            ),
            operation_timeout=float(
                environ.get(
                    "SPANNER_OPERATION_TIMEOUT", DEFAULT_OPERATION_TIMEOUT
                )
            ),
            startup_timeout=float(
                environ.get(
                    "SPANNER_EMULATOR_STARTUP_TIMEOUT", DEFAULT_STARTUP_TIMEOUT
                )
            ),
        )
