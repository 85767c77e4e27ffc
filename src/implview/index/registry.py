"""Implementors registry — trait path to TraitIndex.

Fragments arrive one trait at a time; the registry merges them into a
single lookup table. A later fragment for a trait replaces the earlier
index wholesale. There is no merge within a trait.
"""

import logging
from collections.abc import Iterator

from implview.errors import ConfigurationError
from implview.index.trait_index import TraitIndex

logger = logging.getLogger("implview.loader")


class ImplementorsRegistry:
    """Lookup table of loaded trait indexes, keyed by trait path."""

    __slots__ = ("_indexes",)

    def __init__(self) -> None:
        self._indexes: dict[str, TraitIndex] = {}

    def put(self, index: TraitIndex) -> TraitIndex | None:
        """Store ``index`` under its trait path.

        Returns the index it replaced, if any. Raises
        ``ConfigurationError`` when the index carries no trait path.
        """
        if index.trait is None:
            msg = "Cannot register a TraitIndex without a trait path"
            raise ConfigurationError(msg)
        previous = self._indexes.get(index.trait)
        self._indexes[index.trait] = index
        if previous is not None:
            logger.debug("Replaced index for %s (%d -> %d implementors)", index.trait, previous.count, index.count)
        return previous

    def get(self, trait: str) -> TraitIndex | None:
        return self._indexes.get(trait)

    def __getitem__(self, trait: str) -> TraitIndex:
        return self._indexes[trait]

    def __contains__(self, trait: object) -> bool:
        return trait in self._indexes

    def __len__(self) -> int:
        return len(self._indexes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._indexes)

    def traits_implemented_by(self, impl_name: str) -> list[str]:
        """Trait paths whose index lists ``impl_name`` as an implementor."""
        return [trait for trait, index in self._indexes.items() if index.find(impl_name)]

    def total_implementors(self) -> int:
        return sum(index.count for index in self._indexes.values())
