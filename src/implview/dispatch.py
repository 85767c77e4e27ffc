"""Render callback dispatch.

A one-shot publish/subscribe with a single publisher slot and a single
subscriber slot. The loader publishes each freshly parsed ``TraitIndex``.
When a renderer is registered it is invoked synchronously; otherwise
the index waits in the ``PendingRegistry`` until a renderer registers.

The dispatcher is an ordinary object handed to whoever needs it; there
is no process-wide global.
"""

import logging
from collections.abc import Callable

from implview.errors import DispatchError
from implview.index.trait_index import TraitIndex

logger = logging.getLogger("implview.dispatch")

type Renderer = Callable[[TraitIndex], object]


class PendingRegistry:
    """Holds at most one TraitIndex awaiting a renderer.

    ``store()`` overwrites, so the renderer sees the most recent load.
    ``take()`` hands the value over and clears the slot.
    """

    __slots__ = ("_index",)

    def __init__(self) -> None:
        self._index: TraitIndex | None = None

    def store(self, index: TraitIndex) -> None:
        if self._index is not None:
            logger.debug("Pending index for %s superseded by %s", self._index.trait, index.trait)
        self._index = index

    def take(self) -> TraitIndex | None:
        index, self._index = self._index, None
        return index

    def peek(self) -> TraitIndex | None:
        return self._index

    def __bool__(self) -> bool:
        return self._index is not None


class RenderDispatcher:
    """Routes loaded indexes to the registered renderer.

    Usage::

        dispatcher = RenderDispatcher()
        dispatcher.publish(index)          # no renderer yet: parked

        @dispatcher.register
        def show(index: TraitIndex) -> None:
            ...                            # called at once with the parked index
    """

    __slots__ = ("_pending", "_renderer")

    def __init__(self, pending: PendingRegistry | None = None) -> None:
        self._pending = pending if pending is not None else PendingRegistry()
        self._renderer: Renderer | None = None

    @property
    def pending(self) -> PendingRegistry:
        return self._pending

    @property
    def has_renderer(self) -> bool:
        return self._renderer is not None

    def publish(self, index: TraitIndex) -> None:
        """Deliver ``index`` to the renderer, or park it until one registers."""
        if self._renderer is None:
            self._pending.store(index)
            return
        logger.debug("Rendering %s (%d implementors)", index.trait, index.count)
        self._renderer(index)

    def register(self, renderer: Renderer) -> Renderer:
        """Install ``renderer`` and immediately process any parked index.

        Raises ``DispatchError`` if a renderer is already registered.
        Returns ``renderer`` so this works as a decorator.
        """
        if self._renderer is not None:
            msg = f"A renderer is already registered: {self._renderer!r}"
            raise DispatchError(msg)
        self._renderer = renderer
        index = self._pending.take()
        if index is not None:
            logger.debug("Rendering pending index for %s", index.trait)
            renderer(index)
        return renderer

    def unregister(self) -> None:
        """Clear the renderer slot. Later loads are parked again."""
        self._renderer = None
