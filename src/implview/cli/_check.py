"""``implview check`` — load every fragment under a documentation tree.

Prints a per-trait implementor count and a total. Exits with code 1 on
the first malformed fragment.
"""

import argparse
import sys
from pathlib import Path

from implview.errors import FragmentError
from implview.viewer import Viewer


def run_check(args: argparse.Namespace) -> None:
    root = Path(args.root)
    if not root.is_dir():
        print(f"Error: {root} is not a directory", file=sys.stderr)
        raise SystemExit(1)

    viewer = Viewer()
    try:
        indexes = viewer.load_directory(root)
    except FragmentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for index in indexes:
        print(f"{index.trait}: {index.count}")
    print(f"{len(indexes)} traits, {viewer.registry.total_implementors()} implementors")
