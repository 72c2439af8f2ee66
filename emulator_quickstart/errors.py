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
"""Error types and error classification for the quickstart."""
import enum

from google.api_core import exceptions


class QuickstartError(Exception):
    """Base exception for all errors raised by this package.

    Catching this exception guarantees catching any error raised explicitly
    by the quickstart itself. Errors from the Spanner client library are
    propagated unchanged and can be classified with :func:`error_kind`.
    """


class EmulatorStartError(QuickstartError):
    """Raised when the emulator container cannot be started.

    This is an environmental failure (no Docker engine, image pull failure,
    emulator never became ready) and is never retried.
    """


class ErrorKind(enum.Enum):
    """The failure conditions the quickstart distinguishes."""

    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    ABORTED = "aborted"
    INVALID_ARGUMENT = "invalid_argument"
    UNAVAILABLE = "unavailable"
    ENVIRONMENT = "environment"
    OTHER = "other"


def error_kind(error: BaseException) -> ErrorKind:
    """Map an exception to the kind of failure it represents."""
    match error:
        case EmulatorStartError():
            return ErrorKind.ENVIRONMENT
        case exceptions.AlreadyExists():
            return ErrorKind.ALREADY_EXISTS
        case exceptions.NotFound():
            return ErrorKind.NOT_FOUND
        case exceptions.Aborted():
            return ErrorKind.ABORTED
        case exceptions.InvalidArgument() | exceptions.FailedPrecondition():
            return ErrorKind.INVALID_ARGUMENT
        case exceptions.ServiceUnavailable() | exceptions.DeadlineExceeded():
            return ErrorKind.UNAVAILABLE
        case _:
            return ErrorKind.OTHER
