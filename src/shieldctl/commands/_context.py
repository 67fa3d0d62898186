"""Per-invocation state shared by every shieldctl command.

The root group stores an :class:`AppContext` in ``ctx.obj``; commands
receive it through ``@click.pass_obj``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shieldctl.config.logging import configure_logging
from shieldctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from shieldctl.config.settings import ShieldSettings
    from shieldctl.domain.validation import ValidationPolicy
    from shieldctl.plugins.manager import PluginManager
    from shieldctl.services.command import CommandService
    from shieldctl.services.result import ServiceResult


class AppContext:
    """Settings plus a lazily built :class:`CommandService`.

    Plugins are only discovered when a command first touches ``service``,
    so ``--help`` and ``--version`` never import plugin code.
    """

    def __init__(self, settings: ShieldSettings) -> None:
        self.settings = settings
        self._service: CommandService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> CommandService:
        if self._service is None:
            self._service = self.make_service()
        return self._service

    def make_service(self, *, policy: ValidationPolicy | None = None) -> CommandService:
        """A service with *policy*, or the configured one when omitted."""
        from shieldctl.services.command import CommandService

        return CommandService(
            policy=policy or self.settings.validation.to_policy(),
            plugins=self._load_plugins(),
        )

    def _load_plugins(self) -> PluginManager | None:
        cfg = self.settings.plugins
        if not cfg.enabled:
            return None

        from shieldctl.plugins.manager import PluginManager

        manager = PluginManager()
        manager.discover_and_load(local_dir=Path(cfg.local_dir) if cfg.local_dir else None)
        return manager

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            show_hash=self.settings.output.hash_in_human,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Successes go to stdout with warnings on stderr (JSON mode embeds
        them instead).  Failures go to stderr and exit 1.
        """
        out = self._output_settings()
        text = format_result(result, settings=out)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if not out.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
