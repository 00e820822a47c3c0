"""The ``hello-world`` console script."""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI with production services; ``argv`` defaults to ``sys.argv[1:]``."""
    return run_cli(argv, services_factory=build_production)


__all__ = ["main"]
