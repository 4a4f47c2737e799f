import asyncio
import json
import logging
import sys
from pathlib import Path

import click

from .config import load_config
from .core.errors import SwitchboardError
from .status import build_providers_table
from .status.render import render_report


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Debug logging on stderr")
def cli(verbose: bool) -> None:
    """Messaging gateway diagnostics."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.option("--show-secrets", is_flag=True, help="Reveal token heads/tails instead of fingerprints")
@click.option("--json", "json_mode", is_flag=True, help="Emit the report as JSON")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: $SWITCHBOARD_CONFIG or ~/.switchboard/config.yaml)",
)
def status(show_secrets: bool, json_mode: bool, config_file: Path | None) -> None:
    """Show per-provider readiness"""
    try:
        cfg = load_config(config_file)
    except SwitchboardError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    report = asyncio.run(build_providers_table(cfg, show_secrets=show_secrets))
    if json_mode:
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        return
    click.echo(render_report(report, color=sys.stdout.isatty()))


def main() -> None:
    cli(prog_name="switchboard")


if __name__ == "__main__":
    main()
