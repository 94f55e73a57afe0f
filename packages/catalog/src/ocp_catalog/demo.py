"""Demo: filtering products with composable specifications."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, TextIO

from ocp_specifications import SpecificationFilter, not_

from .criteria import ColorSpecification, SizeSpecification
from .products import Color, Product, Size

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def sample_products() -> list[Product]:
    return [
        Product(name="Apple", color=Color.GREEN, size=Size.SMALL),
        Product(name="Tree", color=Color.GREEN, size=Size.LARGE),
        Product(name="House", color=Color.BLUE, size=Size.LARGE),
    ]


def run_demo(out: TextIO) -> None:
    """Print each demo query and the products it selects."""
    products = sample_products()
    bf: SpecificationFilter[Product] = SpecificationFilter()

    queries = [
        ("Green products", "is green", ColorSpecification(Color.GREEN)),
        ("Large products", "is large", SizeSpecification(Size.LARGE)),
        (
            "Large blue items",
            "is big and blue",
            ColorSpecification(Color.BLUE) & SizeSpecification(Size.LARGE),
        ),
        ("Not green products", "is not green", not_(ColorSpecification(Color.GREEN))),
    ]
    for title, description, spec in queries:
        logger.debug("Running query %r with %r", title, spec)
        out.write(f"{title}:\n")
        for p in bf.filter(products, spec):
            out.write(f" - {p.name} {description}\n")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ocp_catalog",
        description="Filter a small product catalog with composable specifications.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    run_demo(out if out is not None else sys.stdout)
    return 0
