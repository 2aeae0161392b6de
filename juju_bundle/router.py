# -*- coding: utf-8 -*-
"""Location: ./juju_bundle/router.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: juju-bundle contributors

Argument router for the juju-bundle plugin.

The router splits the plugin's command line into three parts:

* plugin-level options (``--verbose``, ``--help``) that appear before the subcommand,
* the subcommand and its *own* arguments (e.g. the bundle path),
* *passthrough* arguments, i.e. everything after the first literal ``--``.

Only the first ``--`` is significant. It is consumed by the router and every
token after it, including further ``--`` tokens, is forwarded verbatim to the
delegate tool:

```console
$ juju-bundle deploy bundle.yaml -- -m foo      # runs: juju deploy bundle.yaml -m foo
$ juju-bundle deploy b.yaml -- -- -m foo        # runs: juju deploy b.yaml -- -m foo
```

Parsing and delegate construction are pure functions; ``route`` is the only
entry-point that spawns anything.
"""

# Standard
from typing import List, Sequence, Tuple

# Third-Party
from rich.console import Console
from rich.markup import escape

# First-Party
from juju_bundle.errors import MissingSubcommand, UnexpectedPassthrough, UnknownSubcommand, UsageError
from juju_bundle.schema import DelegateInvocation, ParsedCommand

PROG_NAME = "juju-bundle"
SEPARATOR = "--"
KNOWN_SUBCOMMANDS = ("deploy", "version")
# Subcommands that forward arguments after the separator to the delegate.
DELEGATING_SUBCOMMANDS = ("deploy",)

DEFAULT_DELEGATE = "juju"
DELEGATE_DEPLOY = "deploy"
DELEGATE_WAIT = "wait"
DEFAULT_BUNDLE = "bundle.yaml"

err_console = Console(stderr=True)


def split_passthrough(tokens: Sequence[str]) -> Tuple[List[str], List[str], bool]:
    """Split *tokens* at the first literal ``--``.

    Args:
        tokens: Tokens following the subcommand

    Returns:
        Tuple of (own arguments, passthrough arguments, separator present)

    Examples:
        >>> split_passthrough(["b.yaml"])
        (['b.yaml'], [], False)
        >>> split_passthrough(["b.yaml", "--", "-m", "foo"])
        (['b.yaml'], ['-m', 'foo'], True)
        >>> split_passthrough(["b.yaml", "--", "--", "-m", "foo"])
        (['b.yaml'], ['--', '-m', 'foo'], True)
        >>> split_passthrough(["--"])
        ([], [], True)
        >>> split_passthrough(["my--bundle.yaml"])
        (['my--bundle.yaml'], [], False)
    """
    tokens = list(tokens)
    try:
        index = tokens.index(SEPARATOR)
    except ValueError:
        return tokens, [], False
    return tokens[:index], tokens[index + 1 :], True


def parse_command(raw_args: Sequence[str], known: Sequence[str] = KNOWN_SUBCOMMANDS) -> ParsedCommand:
    """Resolve the subcommand and split its arguments.

    Leading tokens starting with ``-`` (other than ``--`` itself) are treated
    as plugin-level flags and skipped. The first remaining token must match a
    known subcommand exactly (case-sensitive).

    Args:
        raw_args: Argument vector without the program name
        known: Subcommand names accepted

    Returns:
        ParsedCommand: The parsed command line

    Raises:
        MissingSubcommand: If no subcommand token is present
        UnknownSubcommand: If the subcommand token is not in *known*
        UnexpectedPassthrough: If a separator follows a subcommand that does not delegate

    Examples:
        >>> cmd = parse_command(["deploy", "b.yaml", "--", "-m", "foo"])
        >>> cmd.subcommand, cmd.own_args, cmd.passthrough_args
        ('deploy', ['b.yaml'], ['-m', 'foo'])
        >>> parse_command(["-v", "deploy"]).global_args
        ['-v']
        >>> parse_command(["Deploy"])
        Traceback (most recent call last):
            ...
        juju_bundle.errors.UnknownSubcommand: No such command 'Deploy'
        >>> parse_command(["version", "--", "--junk"])
        Traceback (most recent call last):
            ...
        juju_bundle.errors.UnexpectedPassthrough: 'version' does not accept arguments after '--'
    """
    args = list(raw_args)
    position = 0
    while position < len(args) and args[position].startswith("-") and args[position] != SEPARATOR:
        position += 1

    if position == len(args):
        raise MissingSubcommand()

    subcommand = args[position]
    if subcommand not in known:
        raise UnknownSubcommand(subcommand)

    own_args, passthrough_args, has_separator = split_passthrough(args[position + 1 :])
    if has_separator and subcommand not in DELEGATING_SUBCOMMANDS:
        raise UnexpectedPassthrough(subcommand)

    return ParsedCommand(
        global_args=args[:position],
        subcommand=subcommand,
        own_args=own_args,
        passthrough_args=passthrough_args,
        has_separator=has_separator,
    )


def build_deploy_invocation(bundle: str, passthrough_args: Sequence[str] = (), executable: str = DEFAULT_DELEGATE) -> DelegateInvocation:
    """Build ``<delegate> deploy <bundle> [<passthrough>...]``.

    Args:
        bundle: Bundle path, forwarded verbatim
        passthrough_args: Tokens that followed the separator
        executable: Delegate executable

    Returns:
        DelegateInvocation: The invocation to run

    Examples:
        >>> build_deploy_invocation("b.yaml").args
        ['deploy', 'b.yaml']
        >>> build_deploy_invocation("b.yaml", ["--", "-m", "foo"]).args
        ['deploy', 'b.yaml', '--', '-m', 'foo']
    """
    return DelegateInvocation(executable=executable, args=[DELEGATE_DEPLOY, bundle, *passthrough_args])


def build_wait_invocation(timeout: int, executable: str = DEFAULT_DELEGATE) -> DelegateInvocation:
    """Build ``<delegate> wait -wv -t <timeout>``.

    Args:
        timeout: Seconds to wait for the model to settle
        executable: Delegate executable

    Returns:
        DelegateInvocation: The invocation to run

    Examples:
        >>> build_wait_invocation(60).args
        ['wait', '-wv', '-t', '60']
    """
    return DelegateInvocation(executable=executable, args=[DELEGATE_WAIT, "-wv", "-t", str(timeout)])


def _usage_error(error: UsageError) -> None:
    """Print usage and *error* to stderr the way Click does.

    Args:
        error: The usage error to report
    """
    message = escape(str(error))
    if isinstance(error, UnknownSubcommand):
        message += f". Commands: {', '.join(KNOWN_SUBCOMMANDS)}"
    err_console.print(f"Usage: {PROG_NAME} [OPTIONS] COMMAND [ARGS]...", markup=False, highlight=False)
    err_console.print(f"Try '{PROG_NAME} --help' for help.", markup=False, highlight=False)
    err_console.print()
    err_console.print(f"[red]Error:[/red] {message}", highlight=False)


def _exit_status(code: object) -> int:
    """Translate a ``SystemExit.code`` into a process exit status.

    Args:
        code: The exit code carried by ``SystemExit``

    Returns:
        Exit status as ``sys.exit`` would report it

    Examples:
        >>> _exit_status(None), _exit_status(0), _exit_status(2)
        (0, 0, 2)
        >>> _exit_status("boom")
        1
    """
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _invoke_cli(cli_args: List[str], passthrough_args: List[str]) -> int:
    """Hand the plugin's own arguments to the Typer application.

    The app runs in standalone mode so Typer reports its own usage errors
    (with whichever Click it ships) and always finishes with ``SystemExit``.

    Args:
        cli_args: Plugin options, subcommand and own arguments
        passthrough_args: Arguments to forward to the delegate

    Returns:
        Exit code of the command
    """
    # First-Party
    from juju_bundle.cli import app  # pylint: disable=import-outside-toplevel,cyclic-import

    try:
        app(args=cli_args, prog_name=PROG_NAME, obj={"passthrough": passthrough_args}, standalone_mode=True)
    except SystemExit as e:
        return _exit_status(e.code)
    return 0


def route(raw_args: Sequence[str]) -> int:
    """Route a plugin invocation and return the process exit code.

    Args:
        raw_args: Argument vector without the program name

    Returns:
        The delegate's exit code, or the router's own error code

    Examples:
        >>> route(["frobnicate"])
        2
        >>> route(["version", "--", "--junk"])
        2
    """
    try:
        parsed = parse_command(raw_args)
    except MissingSubcommand as e:
        if raw_args:
            # Plugin flags only (e.g. --help): let the CLI handle them.
            return _invoke_cli(list(raw_args), [])
        _usage_error(e)
        return e.exit_code
    except UsageError as e:
        _usage_error(e)
        return e.exit_code

    return _invoke_cli(parsed.cli_args, parsed.passthrough_args)
