"""POSIX-conventional exit codes for CLI error paths.

Every store failure the CLI reports maps to one :class:`ExitCode`, so
scripts can tell a wrong key from a missing file without parsing stderr.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
    * :func:`exit_code_for` - map a StoreError to its exit code.
"""

from __future__ import annotations

from enum import IntEnum

from bland.domain.errors import (
    AuthenticationError,
    BackendIOError,
    ConfigurationError,
    PathConflictError,
    SerializationError,
    StoreError,
    TransformError,
)


class ExitCode(IntEnum):
    """Exit codes following sysexits.h where a matching code exists.

    * 0-1: generic success / failure
    * 22: EINVAL (bad path or value on the command line)
    * 65: EX_DATAERR (corrupt payload, wrong transform)
    * 74: EX_IOERR (backend read/write failure)
    * 77: EX_NOPERM (authentication failed: tampered data or wrong key)
    * 78: EX_CONFIG (invalid settings or missing key)

    Example:
        >>> int(ExitCode.AUTHENTICATION_FAILED)
        77
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_FOUND = 3
    INVALID_ARGUMENT = 22
    DATA_ERROR = 65
    IO_ERROR = 74
    AUTHENTICATION_FAILED = 77
    CONFIG_ERROR = 78


def exit_code_for(exc: StoreError) -> ExitCode:
    """Return the exit code reported for ``exc``.

    Example:
        >>> exit_code_for(AuthenticationError("bad tag"))
        <ExitCode.AUTHENTICATION_FAILED: 77>
    """
    if isinstance(exc, AuthenticationError):
        return ExitCode.AUTHENTICATION_FAILED
    if isinstance(exc, (TransformError, SerializationError)):
        return ExitCode.DATA_ERROR
    if isinstance(exc, BackendIOError):
        return ExitCode.IO_ERROR
    if isinstance(exc, ConfigurationError):
        return ExitCode.CONFIG_ERROR
    if isinstance(exc, PathConflictError):
        return ExitCode.INVALID_ARGUMENT
    return ExitCode.GENERAL_ERROR


__all__ = ["ExitCode", "exit_code_for"]
