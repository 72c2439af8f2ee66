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
"""Launches the Spanner emulator in a throwaway Docker container."""
from dataclasses import dataclass
import logging
import os
from typing import Optional

from docker.errors import DockerException
from google.api_core.client_options import ClientOptions
from testcontainers.core.container import DockerContainer
from testcontainers.core.waiting_utils import wait_for_logs

from .config import EMULATOR_GRPC_PORT, Settings
from .errors import EmulatorStartError, QuickstartError

logger = logging.getLogger(__name__)

EMULATOR_HOST_ENV = "SPANNER_EMULATOR_HOST"
EMULATOR_READY_LOG = "Cloud Spanner emulator running"


@dataclass(frozen=True)
class ServiceEndpoint:
    """The host and port a running emulator listens on."""

    host: str
    port: int

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def parse(cls, address: str) -> "ServiceEndpoint":
        """Parses a ``host:port`` string such as ``localhost:9010``."""
        host, sep, port = address.rpartition(":")
        if not sep or not host or not port.isdigit():
            raise ValueError(f"Invalid emulator address: {address!r}")
        return cls(host, int(port))

    def client_options(self) -> ClientOptions:
        """Returns client options that point a client at this endpoint."""
        return ClientOptions(api_endpoint=self.address)

    def export_environment(self) -> None:
        """Sets SPANNER_EMULATOR_HOST for tools that discover the emulator
        from the environment."""
        os.environ[EMULATOR_HOST_ENV] = self.address
        logger.debug("Set %s to %s", EMULATOR_HOST_ENV, self.address)


class EmulatorLauncher:
    """Starts and stops a Spanner emulator container.

    The container port is bound to a random free host port, so several
    launchers can run side by side. Use it as a context manager to make sure
    the container is stopped::

        with EmulatorLauncher(settings) as endpoint:
            ...
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or Settings()
        self._container: Optional[DockerContainer] = None
        self._endpoint: Optional[ServiceEndpoint] = None

    @property
    def endpoint(self) -> Optional[ServiceEndpoint]:
        """Returns the endpoint of the running emulator, if any."""
        return self._endpoint

    @property
    def running(self) -> bool:
        return self._container is not None

    def start(self) -> ServiceEndpoint:
        """Starts the emulator and waits until it accepts requests.

        Raises:
            EmulatorStartError: If Docker is unavailable or the emulator does
                not become ready in time.
            QuickstartError: If the emulator is already running.
        """
        if self.running:
            raise QuickstartError("Emulator is already running.")

        settings = self._settings
        logger.debug("Starting emulator from image %s", settings.emulator_image)
        try:
            container = (
                DockerContainer(settings.emulator_image)
                .with_exposed_ports(EMULATOR_GRPC_PORT)
                .with_env("TZ", settings.emulator_timezone)
            )
            container.start()
        except DockerException as e:
            logger.error("Could not start emulator container: %s", e)
            raise EmulatorStartError(
                f"Could not start emulator container: {e}"
            ) from e

        try:
            wait_for_logs(
                container,
                EMULATOR_READY_LOG,
                timeout=settings.startup_timeout,
            )
            endpoint = ServiceEndpoint(
                container.get_container_host_ip(),
                int(container.get_exposed_port(EMULATOR_GRPC_PORT)),
            )
        except (DockerException, TimeoutError) as e:
            container.stop()
            raise EmulatorStartError(f"Emulator did not start: {e}") from e
        except BaseException:
            # Not tracked yet, so stop() and __exit__ cannot reach it.
            container.stop()
            raise

        self._container = container
        self._endpoint = endpoint
        logger.debug("Emulator listening on %s", endpoint.address)
        return endpoint

    def stop(self) -> None:
        """Stops the emulator. Does nothing if it is not running."""
        if self._container is None:
            return
        logger.debug("Stopping emulator on %s", self._endpoint.address)
        try:
            self._container.stop()
        finally:
            self._container = None
            self._endpoint = None

    def __enter__(self) -> ServiceEndpoint:
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
