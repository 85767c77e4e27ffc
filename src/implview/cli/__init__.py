"""implview CLI — inspect, render, and validate implementors fragments.

Entry point registered as ``implview`` in ``pyproject.toml``::

    [project.scripts]
    implview = "implview.cli:main"
"""

import argparse
import logging
import sys

from implview.config import LOG_LEVELS


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``implview`` command."""
    parser = argparse.ArgumentParser(
        prog="implview",
        description="implview — load and render documentation implementors indexes.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help="Logging level (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- implview show ----------------------------------------------------
    show_parser = subparsers.add_parser("show", help="List the implementors in a fragment")
    show_parser.add_argument("fragment", help="Path to a trait.<Name>.js fragment")
    show_parser.add_argument("--trait", default=None, help="Trait path (default: from file name)")

    # -- implview render --------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render a fragment as HTML")
    render_parser.add_argument("fragment", help="Path to a trait.<Name>.js fragment")
    render_parser.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    render_parser.add_argument("--trait", default=None, help="Trait path (default: from file name)")
    render_parser.add_argument("--root-path", default="./", help="Prefix for relative links")
    render_parser.add_argument(
        "--current-crate",
        default=None,
        help="Crate whose implementors are already on the page",
    )
    render_parser.add_argument(
        "--no-synthetic",
        action="store_true",
        help="Leave out auto/blanket implementors",
    )

    # -- implview check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate every fragment in a docs tree")
    check_parser.add_argument("root", help="Documentation root or implementors directory")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "show":
        from implview.cli._show import run_show

        run_show(args)
    elif args.command == "render":
        from implview.cli._render import run_render

        run_render(args)
    elif args.command == "check":
        from implview.cli._check import run_check

        run_check(args)
