"""Command-line entry point for hexforge."""

import argparse
from typing import List, Optional

from . import __version__
from .cli import (
    create_generation_subparsers,
    create_list_subparser,
    create_validate_subparser,
    run_command,
)


def create_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with every subcommand."""
    parser = argparse.ArgumentParser(
        prog="hexforge",
        description="Scaffold hexagonal-architecture components",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Components:
  domain (cd)   model, service, port and adapter for a domain
  handler (ch)  Lambda handler, optional schema and DTO
  service (cs)  service inside a domain
  port (cp)     port interface and its adapter
  adapter (ca)  adapter for an existing port
        """.strip(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    create_generation_subparsers(subparsers)
    create_list_subparser(subparsers)
    create_validate_subparser(subparsers)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the selected command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return 0

    return run_command(args)


if __name__ == "__main__":
    raise SystemExit(main())
