"""HTML rendering for trait indexes.

Creates the kida Environment once and renders the implementors section
of a trait page from a ``TraitIndex``.
"""

import logging
from dataclasses import dataclass

from kida import DictLoader, Environment

from implview.config import ViewerConfig
from implview.index.trait_index import TraitIndex
from implview.render.filters import BUILTIN_FILTERS, impl_anchor
from implview.render.templates import IMPLEMENTORS_TEMPLATE, SUMMARY_TEMPLATE, TEMPLATES

logger = logging.getLogger("implview.render")


@dataclass(frozen=True, slots=True)
class ImplementorRow:
    """Template view of one implementor."""

    module: str
    anchor: str
    markup: str
    signature: str


def create_environment(config: ViewerConfig) -> Environment:
    """Create a kida Environment with the built-in templates and filters."""
    env = Environment(
        loader=DictLoader(dict(TEMPLATES)),
        autoescape=config.autoescape,
    )
    env.update_filters(BUILTIN_FILTERS)
    return env


def render_implementors(env: Environment, index: TraitIndex, config: ViewerConfig) -> str:
    """Render the implementors section for ``index``.

    Implementors from ``config.current_crate`` are left out: they are
    already documented on the trait page itself. Anchor ids are made
    unique with ``-1``, ``-2`` suffixes.
    """
    if config.current_crate:
        index = index.without(config.current_crate)

    seen: dict[str, int] = {}
    rows: list[ImplementorRow] = []
    synthetic_rows: list[ImplementorRow] = []
    for entry in index.entries():
        if entry.synthetic and not config.show_synthetic:
            continue
        row = ImplementorRow(
            module=entry.module,
            anchor=_unique(impl_anchor(entry), seen),
            markup=entry.markup,
            signature=entry.signature,
        )
        (synthetic_rows if entry.synthetic else rows).append(row)

    template = env.get_template(IMPLEMENTORS_TEMPLATE)
    return template.render(
        {
            "trait": index.trait or "",
            "rows": rows,
            "synthetic_rows": synthetic_rows,
            "concrete_count": len(rows),
            "synthetic_count": len(synthetic_rows),
            "root_path": config.root_path,
        }
    )


def render_summary(env: Environment, index: TraitIndex) -> str:
    """One-line ``N implementors in M crates`` summary."""
    template = env.get_template(SUMMARY_TEMPLATE)
    return template.render({"count": index.count, "modules": len(index)})


class HtmlRenderer:
    """Render callback producing HTML for each index it receives.

    Register it with a ``RenderDispatcher``; results are kept in
    ``rendered`` keyed by trait path, and the latest in ``last``.
    """

    __slots__ = ("_config", "_env", "last", "rendered")

    def __init__(self, config: ViewerConfig | None = None, env: Environment | None = None) -> None:
        self._config = config or ViewerConfig()
        self._env = env if env is not None else create_environment(self._config)
        self.rendered: dict[str | None, str] = {}
        self.last: str | None = None

    @property
    def env(self) -> Environment:
        return self._env

    def __call__(self, index: TraitIndex) -> str:
        html = render_implementors(self._env, index, self._config)
        self.rendered[index.trait] = html
        self.last = html
        logger.debug("Rendered %s (%d implementors)", index.trait, index.count)
        return html


def _unique(anchor: str, seen: dict[str, int]) -> str:
    count = seen.get(anchor, 0)
    seen[anchor] = count + 1
    return anchor if count == 0 else f"{anchor}-{count}"
