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
import pytest

from emulator_quickstart import (
    EmulatorLauncher,
    EmulatorStartError,
    ServiceEndpoint,
    Settings,
)

from ._helper import SPANNER_EMULATOR_HOST


@pytest.fixture(scope="module")
def endpoint():
    """The emulator endpoint for a test module.

    Uses SPANNER_EMULATOR_HOST if it is set, and otherwise starts a
    container. Tests are skipped when neither is possible.
    """
    if SPANNER_EMULATOR_HOST:
        yield ServiceEndpoint.parse(SPANNER_EMULATOR_HOST)
        return
    launcher = EmulatorLauncher(Settings.from_env())
    try:
        started = launcher.start()
    except EmulatorStartError as e:
        pytest.skip(f"Spanner emulator not available: {e}")
    try:
        yield started
    finally:
        launcher.stop()
