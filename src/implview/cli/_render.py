"""``implview render`` — render a fragment's implementors section as HTML.

Writes to ``--output`` or stdout. Link rebasing and current-crate
filtering follow the flags, through the same ``Viewer`` pipeline a host
page uses.
"""

import argparse
import sys
from pathlib import Path

from implview.cli._resolve import resolve_fragment
from implview.config import ViewerConfig
from implview.errors import ConfigurationError
from implview.render.html import HtmlRenderer
from implview.viewer import Viewer


def run_render(args: argparse.Namespace) -> None:
    """Render ``args.fragment`` and write the HTML."""
    try:
        config = ViewerConfig(
            root_path=args.root_path,
            current_crate=args.current_crate,
            show_synthetic=not args.no_synthetic,
            log_level=args.log_level,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    index = resolve_fragment(args)
    viewer = Viewer(config)
    renderer = HtmlRenderer(config)
    viewer.on_render(renderer)
    viewer.dispatcher.publish(index)

    html = renderer.last or ""
    if args.output:
        Path(args.output).write_text(html, encoding="utf-8")
        print(f"Wrote {args.output}")
    else:
        sys.stdout.write(html)
