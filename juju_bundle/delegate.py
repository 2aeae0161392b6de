# -*- coding: utf-8 -*-
"""Location: ./juju_bundle/delegate.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: juju-bundle contributors

Delegate process utilities.

Spawns the delegate tool (``juju`` by default) as a child process with the
parent's stdin/stdout/stderr inherited untouched, so prompts and progress
output behave exactly as if the tool was run directly.

Shared functions:
- resolve_executable: Locate the delegate executable on PATH
- normalize_returncode: Map a child return code onto a process exit code
- run_delegate: Run a delegate invocation and return its exit code
"""

# Standard
import logging
import shutil
import subprocess

# First-Party
from juju_bundle.errors import DelegateNotFound
from juju_bundle.schema import DelegateInvocation

logger = logging.getLogger(__name__)


def resolve_executable(name: str) -> str:
    """Locate the delegate executable.

    Args:
        name: Executable name (looked up on PATH) or path

    Returns:
        Full path to the executable

    Raises:
        DelegateNotFound: If the executable cannot be found
    """
    path = shutil.which(name)
    if path is None:
        raise DelegateNotFound(name)
    return path


def normalize_returncode(returncode: int) -> int:
    """Map a child return code onto a process exit code.

    A negative code means the child was killed by that signal; report it the
    way a shell does.

    Args:
        returncode: Value of ``Popen.returncode``

    Returns:
        Exit code in the range 0-255

    Examples:
        >>> normalize_returncode(0)
        0
        >>> normalize_returncode(3)
        3
        >>> normalize_returncode(-2)
        130
        >>> normalize_returncode(-15)
        143
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def run_delegate(invocation: DelegateInvocation) -> int:
    """Run the delegate and block until it exits.

    Output is neither captured nor buffered. A ``KeyboardInterrupt`` while the
    child is running does not abandon it: the terminal delivers SIGINT to the
    child as well, so we keep waiting and report whatever it exits with.

    Args:
        invocation: The delegate invocation to execute

    Returns:
        The delegate's exit code

    Raises:
        DelegateNotFound: If the executable is missing or cannot be spawned
    """
    executable = resolve_executable(invocation.executable)
    argv = [executable, *invocation.args]
    logger.debug("Running delegate: %s", invocation.display())

    try:
        proc = subprocess.Popen(argv)  # nosec B603 - argv list, no shell
    except OSError as e:
        raise DelegateNotFound(invocation.executable, reason=e.strerror or str(e)) from e

    while True:
        try:
            returncode = proc.wait()
            break
        except KeyboardInterrupt:
            logger.debug("Interrupted; waiting for delegate to exit")

    exit_code = normalize_returncode(returncode)
    logger.debug("Delegate exited with code %d", exit_code)
    return exit_code
