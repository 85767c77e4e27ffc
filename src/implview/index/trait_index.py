"""TraitIndex — the parsed, queryable form of one fragment.

An immutable mapping from module name to the ordered implementors that
module contributes. Module order and entry order mirror the fragment,
which mirrors declaration order, so both take part in equality.
"""

from collections.abc import Iterable, Iterator, Mapping

from implview.index.entry import ImplementorEntry, bare_name


class TraitIndex(Mapping[str, tuple[ImplementorEntry, ...]]):
    """Immutable ``module name -> implementors`` mapping for one trait.

    Created at load time and never mutated afterwards. A later fragment
    for the same trait produces a new index that replaces this one.

    Usage::

        index = TraitIndex(
            {"modA": [ImplementorEntry.from_signature("modA", "impl Foo for Bar")]},
            trait="modA::Foo",
        )
        index["modA"][0].impl  # "Bar"
    """

    __slots__ = ("_modules", "_trait")

    def __init__(
        self,
        modules: Mapping[str, Iterable[ImplementorEntry]] | None = None,
        *,
        trait: str | None = None,
    ) -> None:
        self._modules: dict[str, tuple[ImplementorEntry, ...]] = {
            name: tuple(entries) for name, entries in (modules or {}).items()
        }
        self._trait = trait

    @property
    def trait(self) -> str | None:
        """Full trait path (``rustc_ast::visit::Visitor``), if known."""
        return self._trait

    @property
    def modules(self) -> tuple[str, ...]:
        return tuple(self._modules)

    @property
    def count(self) -> int:
        """Total number of implementors across all modules."""
        return sum(len(entries) for entries in self._modules.values())

    # -- Mapping protocol --

    def __getitem__(self, module: str) -> tuple[ImplementorEntry, ...]:
        return self._modules[module]

    def __iter__(self) -> Iterator[str]:
        return iter(self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TraitIndex):
            return NotImplemented
        return self._trait == other._trait and list(self._modules.items()) == list(
            other._modules.items()
        )

    def __hash__(self) -> int:
        return hash((self._trait, tuple(self._modules.items())))

    def __repr__(self) -> str:
        return f"TraitIndex(trait={self._trait!r}, modules={len(self._modules)}, implementors={self.count})"

    # -- Queries --

    def entries(self) -> Iterator[ImplementorEntry]:
        """All implementors, module by module, in fragment order."""
        for entries in self._modules.values():
            yield from entries

    def implementors_of_module(self, module: str) -> tuple[ImplementorEntry, ...]:
        """Implementors contributed by ``module``; empty when absent."""
        return self._modules.get(module, ())

    def find(self, impl_name: str) -> list[ImplementorEntry]:
        """Entries whose implementing type is ``impl_name``.

        Matches the display name exactly (``CfgIfVisitor<'a>``) or its bare
        name (``CfgIfVisitor``).
        """
        wanted = bare_name(impl_name) if "<" in impl_name else impl_name
        return [e for e in self.entries() if e.impl == impl_name or e.impl_name == wanted]

    def synthetic(self) -> list[ImplementorEntry]:
        return [e for e in self.entries() if e.synthetic]

    def concrete(self) -> list[ImplementorEntry]:
        return [e for e in self.entries() if not e.synthetic]

    def without(self, module: str) -> "TraitIndex":
        """A new index with ``module`` left out."""
        return TraitIndex(
            {name: entries for name, entries in self._modules.items() if name != module},
            trait=self._trait,
        )
