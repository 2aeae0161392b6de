# -*- coding: utf-8 -*-
"""Location: ./juju_bundle/errors.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: juju-bundle contributors

Error types raised by the juju-bundle router.

Every error carries the process exit code the CLI reports for it. A delegate
that exits non-zero is *not* an error here: its exit code is propagated as-is.

Examples:
    >>> UnknownSubcommand("frobnicate").exit_code
    2
    >>> DelegateNotFound("juju").exit_code
    127
    >>> str(DelegateNotFound("juju"))
    "Delegate executable 'juju' not found on PATH"
"""

# Standard
from typing import Optional

# Same code Click uses for usage errors.
USAGE_EXIT_CODE = 2
# Shell convention for "command not found".
NOT_FOUND_EXIT_CODE = 127


class JujuBundleError(Exception):
    """Base class for juju-bundle errors."""

    exit_code = 1


class UsageError(JujuBundleError):
    """The plugin's own command line is malformed."""

    exit_code = USAGE_EXIT_CODE


class UnknownSubcommand(UsageError):
    """The first token is not a subcommand this plugin knows about."""

    def __init__(self, token: str, message: Optional[str] = None):
        """Initialize the error.

        Args:
            token: The offending token
            message: Override for the default message
        """
        self.token = token
        super().__init__(message or f"No such command '{token}'")


class MissingSubcommand(UnknownSubcommand):
    """No subcommand was given at all."""

    def __init__(self):
        """Initialize the error."""
        super().__init__("", message="Missing command")


class UnexpectedPassthrough(UsageError):
    """Passthrough arguments were given to a subcommand that does not delegate."""

    def __init__(self, subcommand: str):
        """Initialize the error.

        Args:
            subcommand: The subcommand that received a separator
        """
        self.subcommand = subcommand
        super().__init__(f"'{subcommand}' does not accept arguments after '--'")


class DelegateNotFound(JujuBundleError):
    """The delegate executable could not be located or spawned."""

    exit_code = NOT_FOUND_EXIT_CODE

    def __init__(self, executable: str, reason: Optional[str] = None):
        """Initialize the error.

        Args:
            executable: Name or path of the delegate executable
            reason: Optional OS-level detail (e.g. from a failed spawn)
        """
        self.executable = executable
        self.reason = reason
        message = f"Delegate executable '{executable}' not found on PATH"
        if reason:
            message = f"Unable to run delegate executable '{executable}': {reason}"
        super().__init__(message)
