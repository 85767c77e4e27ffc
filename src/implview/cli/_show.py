"""``implview show`` — print a fragment's implementors grouped by crate."""

import argparse

from implview.cli._resolve import resolve_fragment


def run_show(args: argparse.Namespace) -> None:
    index = resolve_fragment(args)
    heading = index.trait or args.fragment
    print(f"{heading} ({index.count} implementors in {len(index)} crates)")
    for module, entries in index.items():
        print(module)
        for entry in entries:
            marker = " [auto]" if entry.synthetic else ""
            print(f"  {entry.signature}{marker}")
