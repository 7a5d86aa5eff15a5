"""Command-line entry point for the interactive graph console."""

from __future__ import annotations

import argparse

from .console import Console
from .controller import CommandController
from .service import GraphService


def main(argv: list[str] | None = None) -> int:
    """Start the interactive console on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="graphshell",
        description="Interactive console for building and analysing graphs.",
    )
    parser.parse_args(argv)

    console = Console()
    service = GraphService()
    CommandController(console, service)
    return console.run()


if __name__ == "__main__":
    raise SystemExit(main())