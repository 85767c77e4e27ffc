"""Fragment resolution shared by ``implview show`` and ``implview render``."""

import argparse
import sys
from pathlib import Path

from implview.errors import FragmentError
from implview.index.trait_index import TraitIndex
from implview.loader.fragment import parse_fragment, trait_path_from_file


def resolve_fragment(args: argparse.Namespace) -> TraitIndex:
    """Load ``args.fragment``, exiting with code 1 on failure.

    The trait path comes from ``--trait`` when given, otherwise from the
    file name. Files not named ``trait.<Name>.js`` load without one.
    """
    path = Path(args.fragment)
    trait = args.trait
    if trait is None:
        try:
            trait = trait_path_from_file(path)
        except FragmentError:
            trait = None

    try:
        return parse_fragment(path.read_bytes(), trait=trait, label=str(path))
    except (FragmentError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
