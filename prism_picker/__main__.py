"""
PRISM — Entry Point
Run: python -m prism_picker [dark|light|other]  OR  prism
"""

from __future__ import annotations

import click

from .app import PrismApp
from .catalog import CATALOGS
from .logging_setup import configure_logging
from .store import ConfigStore


@click.command()
@click.argument("catalog", required=False, type=click.Choice(list(CATALOGS)))
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Log level for ~/.prism-picker/logs/prism.log",
)
def main(catalog: str | None, log_level: str) -> None:
    """Browse themes with live preview. CATALOG opens that list straight away."""
    store = ConfigStore()
    configure_logging(store.logs_dir, log_level)
    app = PrismApp(store=store, start_catalog=catalog)
    app.run()


if __name__ == "__main__":
    main()
