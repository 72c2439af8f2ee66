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

"""Quickstart for running Cloud Spanner against a local emulator."""
import logging
from typing import Final

from .config import DatabaseIdentity, Settings
from .connection import Connection, connect, create_client
from .emulator import EmulatorLauncher, ServiceEndpoint
from .errors import EmulatorStartError, ErrorKind, QuickstartError, error_kind
from .keys import GeneratedKey, UniqueKeyGenerator
from .provisioner import Provisioner
from .quickstart import run_quickstart
from .reader import Row, query
from .writer import InsertedRow, ensure_table, insert_row

__version__: Final[str] = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__: list[str] = [
    "Connection",
    "DatabaseIdentity",
    "EmulatorLauncher",
    "EmulatorStartError",
    "ErrorKind",
    "GeneratedKey",
    "InsertedRow",
    "Provisioner",
    "QuickstartError",
    "Row",
    "ServiceEndpoint",
    "Settings",
    "UniqueKeyGenerator",
    "connect",
    "create_client",
    "ensure_table",
    "error_kind",
    "insert_row",
    "query",
    "run_quickstart",
]
