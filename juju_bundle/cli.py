# -*- coding: utf-8 -*-
"""Location: ./juju_bundle/cli.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: juju-bundle contributors

juju-bundle CLI ─ a thin wrapper around ``juju deploy`` for bundles.

This module is exposed as a **console-script** via:

    [project.scripts]
    juju-bundle = "juju_bundle.cli:main"

Juju picks up any ``juju-<name>`` executable on PATH as a plugin, so a user
can simply type ``juju bundle deploy ...``.

Features
─────────
* Resolves the plugin's own subcommand and options.
* Forwards everything after the first ``--`` verbatim to the delegate tool.
* Runs the delegate with inherited stdin/stdout/stderr and mirrors its exit code.

Typical usage
─────────────
```console
$ juju bundle deploy                            # juju deploy bundle.yaml
$ juju bundle deploy my-bundle.yaml -- -m prod  # juju deploy my-bundle.yaml -m prod
$ juju bundle deploy --wait 120 b.yaml          # juju wait -wv -t 120, then deploy
$ juju bundle deploy --dry-run b.yaml -- --trust
```
"""

# Standard
import sys

# Third-Party
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
import typer
from typing_extensions import Annotated

# First-Party
from juju_bundle import __version__
from juju_bundle.config import get_settings
from juju_bundle.delegate import run_delegate
from juju_bundle.errors import DelegateNotFound
from juju_bundle.logging_config import configure_logging
from juju_bundle.router import build_deploy_invocation, build_wait_invocation, DEFAULT_BUNDLE, route

app = typer.Typer(
    help="Interact with a Juju bundle. Arguments after '--' are passed on to the delegate tool.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


@app.callback()
def cli(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output")] = False,
):
    """Interact with a bundle and the charms contained therein.

    Args:
        ctx: Typer context object
        verbose: Enable debug logging
    """
    ctx.ensure_object(dict)
    ctx.obj.setdefault("passthrough", [])
    ctx.obj["verbose"] = verbose

    settings = get_settings()
    configure_logging(settings.log_level, verbose=verbose, force=True)


@app.command()
def deploy(
    ctx: typer.Context,
    bundle: Annotated[str, typer.Argument(help="The bundle file to deploy")] = DEFAULT_BUNDLE,
    wait: Annotated[int, typer.Option("--wait", min=0, help="Seconds to wait for the model to stabilize before deploying (0 disables)")] = 0,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Print the delegate command without running it")] = False,
):
    """Deploy a bundle

    Runs ``juju deploy BUNDLE`` followed by any arguments given after ``--``.

    Args:
        ctx: Typer context object
        bundle: Path to the bundle file, forwarded verbatim
        wait: Seconds to run ``juju wait`` for before deploying
        dry_run: Print the delegate command and exit

    Raises:
        Exit: Always, carrying the delegate's exit code
    """
    settings = get_settings()
    passthrough = ctx.obj.get("passthrough", [])
    invocation = build_deploy_invocation(bundle, passthrough, executable=settings.delegate)

    if dry_run:
        if wait > 0:
            console.print(build_wait_invocation(wait, executable=settings.delegate).display(), markup=False, highlight=False, soft_wrap=True)
        console.print(invocation.display(), markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(0)

    try:
        if wait > 0:
            wait_code = run_delegate(build_wait_invocation(wait, executable=settings.delegate))
            if wait_code != 0:
                err_console.print(f"[red]✗ Model did not stabilize, not deploying (exit code {wait_code})[/red]")
                raise typer.Exit(wait_code)

        exit_code = run_delegate(invocation)
    except DelegateNotFound as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(e.exit_code)

    raise typer.Exit(exit_code)


@app.command()
def version():
    """Show version information"""
    console.print(Panel(f"[bold]juju-bundle[/bold]\n" f"Version: {__version__}\n" f"Delegate: {escape(get_settings().delegate)}", title="Version Info", border_style="blue"))


def main():
    """Entry point for the *juju-bundle* console script.

    Raises:
        Exception: Any unhandled exception (re-raised in debug mode)
    """
    try:
        exit_code = route(sys.argv[1:])
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        err_console.print(f"[red]Fatal error: {escape(str(e))}[/red]")
        if get_settings().debug:
            raise
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
