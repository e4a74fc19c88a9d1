"""
Console output for the ACP command line.

Human-readable output goes to stdout through click; JSON mode replaces every
rendered view with the underlying data.
"""

import dataclasses
import json
from collections.abc import Callable
from typing import Any, NoReturn

import click


def _to_jsonable(data: Any) -> Any:
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return dataclasses.asdict(data)
    if isinstance(data, (list, tuple)):
        return [_to_jsonable(item) for item in data]
    return data


class Console:
    """Line-oriented terminal output."""

    def __init__(self, json_mode: bool = False, color: bool | None = None) -> None:
        """
        Args:
            json_mode: Print data as JSON instead of rendering it
            color: Force styling on or off (default: autodetect from the terminal)
        """
        self.json_mode = json_mode
        self.color = color

    def log(self, message: str = "") -> None:
        if self.json_mode:
            return
        click.echo(message, color=self.color)

    def dim(self, text: str) -> str:
        return click.style(text, dim=True)

    def heading(self, title: str) -> None:
        self.log("")
        self.log(click.style(f"  {title}", bold=True))
        self.log("")

    def output(self, data: Any, render: Callable[[Any], None]) -> None:
        """Render data, or print it as JSON in JSON mode."""
        if self.json_mode:
            click.echo(json.dumps(_to_jsonable(data), indent=2))
            return
        render(data)

    def fatal(self, message: str) -> NoReturn:
        """Report an unrecoverable error and stop the command with exit status 1."""
        raise click.ClickException(message)
