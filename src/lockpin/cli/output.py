"""Output utilities for CLI commands with clear intent.

user_output goes to stderr and is meant for people; machine_output goes to
stdout and is the payload other tools consume.
"""

import click


def user_output(message: str) -> None:
    """Write a diagnostic or status message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Write program output to stdout."""
    click.echo(message)
