# -*- coding: utf-8 -*-
"""Location: ./juju_bundle/schema.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: juju-bundle contributors

Pydantic models for a parsed plugin command line and the delegate invocation built from it"""

# Standard
import shlex
from typing import List

# Third-Party
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParsedCommand(BaseModel):
    """Plugin command line split into its parts.

    Attributes:
        global_args: Plugin-level option tokens seen before the subcommand
        subcommand: The resolved subcommand name
        own_args: Tokens after the subcommand and before the first ``--``
        passthrough_args: Tokens after the first ``--``, verbatim
        has_separator: Whether a ``--`` separator was present

    Examples:
        >>> cmd = ParsedCommand(subcommand="deploy", own_args=["b.yaml"], passthrough_args=["-m", "foo"], has_separator=True)
        >>> cmd.cli_args
        ['deploy', 'b.yaml']
        >>> ParsedCommand(global_args=["-v"], subcommand="deploy").cli_args
        ['-v', 'deploy']
    """

    model_config = ConfigDict(frozen=True)

    global_args: List[str] = Field(default_factory=list, description="Plugin options before the subcommand")
    subcommand: str = Field(..., description="Subcommand name")
    own_args: List[str] = Field(default_factory=list, description="Arguments owned by the subcommand")
    passthrough_args: List[str] = Field(default_factory=list, description="Arguments forwarded to the delegate")
    has_separator: bool = Field(False, description="Whether a '--' separator was present")

    @property
    def cli_args(self) -> List[str]:
        """Tokens handed to the plugin's own option parser.

        Returns:
            Global options, subcommand and own arguments, in order
        """
        return [*self.global_args, self.subcommand, *self.own_args]


class DelegateInvocation(BaseModel):
    """Argument vector executed against the delegate tool.

    Examples:
        >>> inv = DelegateInvocation(executable="juju", args=["deploy", "b.yaml", "-m", "foo"])
        >>> inv.command
        ['juju', 'deploy', 'b.yaml', '-m', 'foo']
        >>> inv.display()
        'juju deploy b.yaml -m foo'
        >>> DelegateInvocation(executable="juju", args=["deploy", "my bundle.yaml"]).display()
        "juju deploy 'my bundle.yaml'"
    """

    model_config = ConfigDict(frozen=True)

    executable: str = Field("juju", description="Delegate executable name or path")
    args: List[str] = Field(default_factory=list, description="Arguments passed to the delegate")

    @field_validator("executable")
    @classmethod
    def validate_executable(cls, v: str) -> str:
        """Validate the executable name is non-empty

        Args:
            v: Executable value to validate

        Returns:
            Validated executable

        Raises:
            ValueError: If the executable is empty or whitespace only
        """
        if not v or not v.strip():
            raise ValueError("Delegate executable cannot be empty")
        return v

    @property
    def command(self) -> List[str]:
        """Full argv including the executable.

        Returns:
            Executable followed by its arguments
        """
        return [self.executable, *self.args]

    def display(self) -> str:
        """Render the command for humans. Never used to spawn.

        Returns:
            Shell-quoted command line
        """
        return shlex.join(self.command)
