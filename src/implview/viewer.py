"""Viewer — wires the loader, registry, dispatcher and renderer together.

Every collaborator is passed in or created here; nothing is global.
Loading a fragment stores its index in the registry and publishes it to
the dispatcher, which hands it to the render callback (now, or as soon
as one registers).
"""

import logging
from pathlib import Path

import httpx
from kida import Environment

from implview.config import ViewerConfig
from implview.dispatch import Renderer, RenderDispatcher
from implview.index.registry import ImplementorsRegistry
from implview.index.trait_index import TraitIndex
from implview.loader.fetch import fetch_fragment
from implview.loader.fragment import (
    FragmentSource,
    iter_fragment_files,
    load_fragment_file,
    parse_fragment,
)
from implview.render.html import create_environment, render_implementors

logger = logging.getLogger("implview.loader")


class Viewer:
    """Implementors index viewer.

    Usage::

        viewer = Viewer(ViewerConfig(root_path="../../"))

        @viewer.on_render
        def show(index: TraitIndex) -> None:
            print(viewer.render(index.trait))

        viewer.load_file("doc/implementors/core/ops/bit/trait.BitXor.js")
    """

    __slots__ = ("_env", "config", "dispatcher", "registry")

    def __init__(
        self,
        config: ViewerConfig | None = None,
        *,
        dispatcher: RenderDispatcher | None = None,
        registry: ImplementorsRegistry | None = None,
    ) -> None:
        self.config = config or ViewerConfig()
        self.dispatcher = dispatcher if dispatcher is not None else RenderDispatcher()
        self.registry = registry if registry is not None else ImplementorsRegistry()
        self._env: Environment | None = None

    # -- Loading --

    def load(self, source: FragmentSource, *, trait: str | None = None) -> TraitIndex:
        """Parse a fragment, register it, and publish it to the renderer."""
        index = parse_fragment(source, trait=trait)
        return self._accept(index)

    def load_file(self, path: str | Path, *, root: str | Path | None = None) -> TraitIndex:
        return self._accept(load_fragment_file(path, root=root))

    def load_directory(self, root: str | Path) -> list[TraitIndex]:
        """Load every ``trait.*.js`` fragment under ``root``, in path order."""
        indexes = [self._accept(load_fragment_file(path, root=root)) for path in iter_fragment_files(root)]
        logger.info("Loaded %d fragments from %s", len(indexes), root)
        return indexes

    async def fetch(
        self,
        url: str,
        *,
        trait: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> TraitIndex:
        index = await fetch_fragment(url, trait=trait, client=client, timeout=self.config.fetch_timeout)
        return self._accept(index)

    # -- Rendering --

    def on_render(self, func: Renderer) -> Renderer:
        """Register the render callback. Usable as a decorator."""
        return self.dispatcher.register(func)

    def render(self, trait: str) -> str:
        """HTML implementors section for a loaded trait.

        Raises ``KeyError`` if the trait has not been loaded.
        """
        index = self.registry[trait]
        if self._env is None:
            self._env = create_environment(self.config)
        return render_implementors(self._env, index, self.config)

    def _accept(self, index: TraitIndex) -> TraitIndex:
        if index.trait is not None:
            self.registry.put(index)
        self.dispatcher.publish(index)
        return index
