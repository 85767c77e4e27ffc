"""HTML rendering of implementor listings via kida.

Basic usage::

    from implview.render import HtmlRenderer

    renderer = HtmlRenderer(ViewerConfig(root_path="../../"))
    html = renderer(index)
"""

from implview.render.filters import impl_anchor, pluralize, rebase_links
from implview.render.html import (
    HtmlRenderer,
    ImplementorRow,
    create_environment,
    render_implementors,
    render_summary,
)

__all__ = [
    "HtmlRenderer",
    "ImplementorRow",
    "create_environment",
    "impl_anchor",
    "pluralize",
    "rebase_links",
    "render_implementors",
    "render_summary",
]
