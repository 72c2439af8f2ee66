#!/usr/bin/env python

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
"""Writes and reads a row on an emulator that is already running.

Start the emulator first, for example with::

    docker run -p 9010:9010 gcr.io/cloud-spanner-emulator/emulator

and run this sample with SPANNER_EMULATOR_HOST=localhost:9010.
"""
import dataclasses
import logging
import os

from emulator_quickstart import QuickstartError, Settings, run_quickstart


def run_sample(emulator_host):
    settings = dataclasses.replace(
        Settings.from_env(), emulator_host=emulator_host
    )
    try:
        rows = run_quickstart(settings)
        print(f"Read {len(rows)} row(s) from {settings.identity.database_path}")
    except QuickstartError as e:
        print(f"Quickstart failed: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_sample(os.environ.get("SPANNER_EMULATOR_HOST", "localhost:9010"))
