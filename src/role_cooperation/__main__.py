"""Command-line entry point: answer one query and print the report."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from role_cooperation.graph import create_role_cooperation
from role_cooperation.utils import setup_logging

logger = logging.getLogger("role_cooperation.cli")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="role-cooperation",
        description="Answer a query with a team of role-playing research agents.",
    )
    parser.add_argument("query", help="The question or request to answer")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging()
    try:
        agent = create_role_cooperation()
        report = agent.run(args.query)
    except Exception:
        logger.exception("Run failed")
        return 1
    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
