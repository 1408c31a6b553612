"""Where: src/lfmq/ui/cli/commands/config.py
What: Persist and display the CLI configuration.
Why: Let users store their API key once instead of exporting it per shell.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from lfmq.config.config import Config
from lfmq.ui.cli.args.options import ConfigArgs


def mask_secret(value: str | None) -> str:
    """Show only the last four characters of a credential."""

    if not value:
        return "(not set)"
    if len(value) <= 4:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


@final
class ConfigCommand:
    """Run the ``config`` subcommand."""

    def __init__(self, args: ConfigArgs, console: Console | None = None) -> None:
        self.args = args
        self.console = console or Console()

    def execute(self) -> Config:
        configuration = Config.load()
        changed = False
        if self.args.api_key is not None:
            configuration.api_key = self.args.api_key.strip() or None
            changed = True
        if self.args.contact is not None:
            configuration.contact = self.args.contact.strip() or None
            changed = True

        if changed:
            target = configuration.save()
            self.console.print(f"Configuration written to {target}")

        if self.args.show or not changed:
            self.console.print(f"Config file: {Config.source()}")
            self.console.print(f"api_key: {mask_secret(configuration.api_key)}")
            self.console.print(f"api_root: {configuration.api_root}")
            self.console.print(f"timeout_seconds: {configuration.timeout_seconds}")
            self.console.print(f"contact: {configuration.contact or '(not set)'}")
        return configuration
