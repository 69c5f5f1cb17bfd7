# SPDX-License-Identifier: MIT
"""Shared state and output helpers for CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from .config import CLIConfig, load_config


@dataclass
class Context:
    """CLI context object passed to commands.

    Attributes:
        project_dir: Directory given with ``-C``, or None to search from cwd
        verbose: Whether ``-v`` was given
        config: Configuration, loaded on first use
    """

    project_dir: Optional[Path] = None
    verbose: bool = False
    config: Optional[CLIConfig] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def detail(self, message: str) -> None:
        """Print a message only in verbose mode."""
        if self.verbose:
            click.secho(message, dim=True)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    click.echo(message)
