"""Fragment loading.

Turn generator output into ``TraitIndex`` values: from text, files, a
documentation tree, or over HTTP.

Basic usage::

    from implview.loader import load_fragment_file

    index = load_fragment_file("doc/implementors/core/ops/bit/trait.BitXor.js")
    index.trait  # "core::ops::bit::BitXor"
"""

from implview.loader.fetch import fetch_fragment, trait_path_from_url
from implview.loader.fragment import (
    iter_fragment_files,
    load_fragment_file,
    parse_fragment,
    trait_path_from_file,
)

__all__ = [
    "fetch_fragment",
    "iter_fragment_files",
    "load_fragment_file",
    "parse_fragment",
    "trait_path_from_file",
    "trait_path_from_url",
]
