"""Docs page — the host page side of an implementors fragment.

A trait page loads its ``implementors/.../trait.<Name>.js`` fragment and,
independently, initialises the code that renders it. Either can happen
first; the dispatcher parks the index until the renderer is ready.

Run:
    python app.py path/to/doc/implementors/core/ops/bit/trait.BitXor.js
"""

import sys

from implview import TraitIndex, Viewer, ViewerConfig
from implview.render import HtmlRenderer

PAGE = """\
<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>{title}</title></head>
<body>
<main>
<h1>Trait <span class="trait">{title}</span></h1>
{implementors}
</main>
</body>
</html>
"""

config = ViewerConfig(root_path="../../../")
viewer = Viewer(config)
renderer = HtmlRenderer(config)
pages: dict[str, str] = {}


def page_renderer(index: TraitIndex) -> None:
    """Render callback: wrap the implementors section in a full page."""
    title = index.trait or "implementors"
    pages[title] = PAGE.format(title=title, implementors=renderer(index))


def start() -> None:
    """Initialise the page. Any fragment loaded earlier is rendered now."""
    viewer.on_render(page_renderer)


if __name__ == "__main__":
    start()
    for path in sys.argv[1:]:
        viewer.load_file(path)
    for html in pages.values():
        sys.stdout.write(html)
