"""Implementor index types.

``ImplementorEntry`` describes one implementor, ``TraitIndex`` holds one
trait's implementors grouped by module, and ``ImplementorsRegistry``
collects trait indexes keyed by trait path.
"""

from implview.index.entry import ImplementorEntry, Link, bare_name, split_signature
from implview.index.registry import ImplementorsRegistry
from implview.index.trait_index import TraitIndex

__all__ = [
    "ImplementorEntry",
    "ImplementorsRegistry",
    "Link",
    "TraitIndex",
    "bare_name",
    "split_signature",
]
