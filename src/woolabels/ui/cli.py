from __future__ import annotations

import os
from pathlib import Path
import sys
from typing import NoReturn

from dotenv import load_dotenv
from loguru import logger
import typer

from woolabels.config import load_packaging_config_from_env
from woolabels.errors import WooLabelsError
from woolabels.products.csv_loader import ProductCSVLoader
from woolabels.ui.renderer import LabelRenderer
from woolabels.woocommerce.csv_loader import WooCommerceCSVLoader
from woolabels.woocommerce.labels import assemble_labels

# Load environment variables from .env
load_dotenv()

app = typer.Typer(
    help="Woolabels — shipping labels and packing summary from WooCommerce exports.",
    no_args_is_help=True,
)


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1) from None


@app.callback()
def configure_logging() -> None:
    # Per-order debug lines stay hidden unless WOOLABELS_LOG_LEVEL asks for them
    logger.remove()
    try:
        logger.add(
            sys.stderr,
            format="{time:YYYY-MM-DD HH:mm:ss} [{level}] {name}: {message}",
            level=os.environ.get("WOOLABELS_LOG_LEVEL", "WARNING").upper(),
        )
    except ValueError as e:
        _fail(e)


@app.command("labels")
def labels_cmd(
    csv_path: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, help="WooCommerce order export (CSV)"
    ),
    products: Path | None = typer.Option(  # noqa: B008
        None,
        exists=True,
        dir_okay=False,
        help="Optional ';'-delimited product list used to print EAN barcodes",
    ),
    no_multipack: bool = typer.Option(
        False,
        "--no-multipack",
        help="Ship every order as a single package",
    ),
) -> None:
    """Print one shipping label per order, one table per package."""
    try:
        config = load_packaging_config_from_env()
        input_data = WooCommerceCSVLoader(csv_path).load()
        ean_lookup = ProductCSVLoader(products).load().ean_for if products else None
        orders = input_data.orders(config, multipack=False if no_multipack else None)
        labels = assemble_labels(orders, ean_lookup)
    except (WooLabelsError, ValueError) as e:
        _fail(e)

    LabelRenderer().render_labels(labels)


@app.command("summary")
def summary_cmd(
    csv_path: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, help="WooCommerce order export (CSV)"
    ),
) -> None:
    """Print how many line items name each product, across all orders."""
    try:
        entries = WooCommerceCSVLoader(csv_path).load().summary()
    except WooLabelsError as e:
        _fail(e)

    LabelRenderer().render_summary(entries)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
