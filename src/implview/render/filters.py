"""Template filters for implementor listings.

Registered on every implview kida Environment.
"""

import re
from typing import Any
from urllib.parse import quote

from kida.template import Markup

from implview.index.entry import ImplementorEntry

_HREF = re.compile(r'(\bhref=")([^"]*)(")')


def rebase_links(markup: Any, root_path: str = "./") -> Markup:
    """Prefix relative ``href`` values with the page's root path.

    Generator markup links items relative to the documentation root
    (``rustc_ast/visit/trait.Visitor.html``); pages nested deeper need a
    ``../../`` style prefix. Absolute, root-relative and fragment links
    are left alone.

    Example:
        {{ row.markup | rebase_links("../../") }}
    """
    prefix = root_path if not root_path or root_path.endswith("/") else f"{root_path}/"

    def _rebase(match: re.Match[str]) -> str:
        href = match.group(2)
        if not prefix or _is_absolute(href):
            return match.group(0)
        return f"{match.group(1)}{prefix}{href}{match.group(3)}"

    return Markup(_HREF.sub(_rebase, str(markup)))


def impl_anchor(entry: ImplementorEntry) -> str:
    """Fragment id for an implementor: ``impl-Visitor%3C'ast%3E-for-CfgIfVisitor%3C'a%3E``."""
    trait = _anchor_part(entry.trait)
    impl = _anchor_part(entry.impl)
    if not trait:
        return f"impl-{impl}"
    if entry.negative:
        trait = f"!{trait}"
    return f"impl-{trait}-for-{impl}"


def pluralize(count: int, singular: str, plural: str = "") -> str:
    """``1 | pluralize("implementor")`` -> ``1 implementor``."""
    word = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {word}"


def _anchor_part(text: str) -> str:
    return quote("".join(text.split()), safe="'!,")


def _is_absolute(href: str) -> bool:
    return not href or href.startswith(("/", "#", "mailto:", "data:")) or "://" in href


BUILTIN_FILTERS: dict[str, Any] = {
    "impl_anchor": impl_anchor,
    "pluralize": pluralize,
    "rebase_links": rebase_links,
}
