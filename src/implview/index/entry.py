"""Implementor descriptors.

``ImplementorEntry`` is the parsed form of one descriptor in a fragment:
one type implementing one trait, with the generator's pre-rendered
markup kept verbatim next to a plain-text signature.

Markup is parsed with the standard library ``HTMLParser``. Only anchors
carry structure we care about; everything else contributes text.
"""

import html
import re
from dataclasses import dataclass
from html.parser import HTMLParser

_BREAK_TAGS = frozenset({"br", "div", "p", "section"})
_OPENERS = {"<": ">", "(": ")", "[": "]"}
_CLOSERS = frozenset(_OPENERS.values())
_NAME = re.compile(r"[A-Za-z_][\w:]*")
_LEADING_REF = re.compile(r"^(?:&(?:'\w+\s+)?(?:mut\s+)?|\*(?:const|mut)\s+|dyn\s+)+")


@dataclass(frozen=True, slots=True)
class Link:
    """A hyperlink inside descriptor markup."""

    kind: str
    href: str
    title: str
    text: str

    @property
    def path(self) -> str:
        """Item path from the title (``trait core::ops::BitXor`` -> ``core::ops::BitXor``)."""
        _, _, path = self.title.partition(" ")
        return path or self.title

    @property
    def is_relative(self) -> bool:
        """True for hrefs resolved against the documentation root."""
        if not self.href or self.href.startswith(("/", "#")):
            return False
        return "://" not in self.href and not self.href.startswith(("mailto:", "data:"))


@dataclass(frozen=True, slots=True)
class ImplementorEntry:
    """One type implementing one trait. Immutable once constructed.

    ``trait`` and ``impl`` are display names split out of the signature
    (``Visitor<'ast>`` and ``CfgIfVisitor<'a>``). ``markup`` is the
    generator's HTML, trusted and rendered as-is.
    """

    module: str
    trait: str
    impl: str
    signature: str
    markup: str = ""
    synthetic: bool = False
    types: tuple[str, ...] = ()
    negative: bool = False
    links: tuple[Link, ...] = ()
    trait_path: str | None = None
    impl_path: str | None = None

    @classmethod
    def from_markup(
        cls,
        module: str,
        markup: str,
        *,
        synthetic: bool = False,
        types: tuple[str, ...] = (),
    ) -> "ImplementorEntry":
        """Build an entry from generator markup (``impl <a ...>Foo</a> for ...``)."""
        parser = _MarkupParser()
        parser.feed(markup)
        parser.close()

        raw = parser.text
        parts = split_signature(raw)
        trait_path = None
        impl_path = None
        if parts.for_offset >= 0:
            for link, start in zip(parser.links, parser.starts, strict=True):
                if trait_path is None and link.kind == "trait" and parts.head_offset <= start < parts.for_offset:
                    trait_path = link.path
                elif start >= parts.for_offset:
                    impl_path = link.path
                    break

        return cls(
            module=module,
            trait=parts.trait,
            impl=parts.impl,
            signature=_collapse(raw),
            markup=markup,
            synthetic=synthetic,
            types=types,
            negative=parts.negative,
            links=tuple(parser.links),
            trait_path=trait_path,
            impl_path=impl_path,
        )

    @classmethod
    def from_signature(cls, module: str, signature: str) -> "ImplementorEntry":
        """Build an entry from a plain signature such as ``impl Foo for Bar``."""
        parts = split_signature(signature)
        return cls(
            module=module,
            trait=parts.trait,
            impl=parts.impl,
            signature=_collapse(signature),
            markup=html.escape(signature, quote=False),
            negative=parts.negative,
        )

    @property
    def impl_name(self) -> str:
        """Implementing type without references or generic arguments."""
        return bare_name(self.impl)

    @property
    def trait_name(self) -> str:
        """Trait without generic arguments."""
        return bare_name(self.trait)


@dataclass(frozen=True, slots=True)
class SignatureParts:
    trait: str
    impl: str
    negative: bool
    head_offset: int  # Start of the trait head, past ``impl<...>``
    for_offset: int  # Offset of the top-level ``for`` keyword, -1 when absent


def split_signature(signature: str) -> SignatureParts:
    """Split ``impl<G> Trait<A> for Type<B> where ...`` into its parts.

    Nesting of ``<>``, ``()`` and ``[]`` is respected, so ``for`` inside
    generic arguments or higher-ranked bounds does not split. A signature
    without a top-level ``for`` is treated as an inherent impl: the whole
    head becomes ``impl`` and ``trait`` is empty.
    """
    text = signature.replace("\xa0", " ")
    pos = _skip_space(text, 0)
    if text.startswith("unsafe ", pos):
        pos = _skip_space(text, pos + len("unsafe "))
    if text.startswith("impl", pos):
        pos += len("impl")
        if text.startswith("<", pos):
            pos = _skip_balanced(text, pos)
    pos = _skip_space(text, pos)

    for_at = _find_keyword(text, "for", pos)
    if for_at < 0:
        where_at = _find_keyword(text, "where", pos)
        head = text[pos:where_at] if where_at >= 0 else text[pos:]
        return SignatureParts(trait="", impl=_collapse(head), negative=False, head_offset=pos, for_offset=-1)

    trait = _collapse(text[pos:for_at])
    negative = trait.startswith("!")
    if negative:
        trait = trait[1:].lstrip()

    rest = for_at + len("for")
    where_at = _find_keyword(text, "where", rest)
    impl = text[rest:where_at] if where_at >= 0 else text[rest:]
    return SignatureParts(
        trait=trait,
        impl=_collapse(impl),
        negative=negative,
        head_offset=pos,
        for_offset=for_at,
    )


def bare_name(display: str) -> str:
    """``&'a mut Foo<T>`` -> ``Foo``; ``core::ops::BitXor<u8>`` -> ``BitXor``."""
    stripped = _LEADING_REF.sub("", display.strip())
    match = _NAME.match(stripped)
    if match is None:
        return stripped
    return match.group(0).rsplit("::", 1)[-1]


# -- helpers ------------------------------------------------------------------


class _MarkupParser(HTMLParser):
    """Collect decoded text and anchors, with each anchor's text offset."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._parts: list[str] = []
        self._length = 0
        self._anchor: tuple[str, str, str, int] | None = None
        self._anchor_text: list[str] = []
        self.links: list[Link] = []
        self.starts: list[int] = []

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _BREAK_TAGS or _is_where(attrs):
            self._append(" ")
        if tag == "a":
            values = dict(attrs)
            self._anchor = (
                values.get("class") or "",
                values.get("href") or "",
                values.get("title") or "",
                self._length,
            )
            self._anchor_text = []

    def handle_endtag(self, tag: str) -> None:
        if tag != "a" or self._anchor is None:
            return
        kind, href, title, start = self._anchor
        self.links.append(Link(kind=kind, href=href, title=title, text="".join(self._anchor_text)))
        self.starts.append(start)
        self._anchor = None

    def handle_data(self, data: str) -> None:
        self._append(data)
        if self._anchor is not None:
            self._anchor_text.append(data)

    def _append(self, data: str) -> None:
        data = data.replace("\xa0", " ")
        self._parts.append(data)
        self._length += len(data)


def _collapse(text: str) -> str:
    return " ".join(text.replace("\xa0", " ").split())


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _skip_balanced(text: str, pos: int) -> int:
    """Return the offset just past the bracket group opening at ``pos``."""
    depth = 0
    for i in range(pos, len(text)):
        char = text[i]
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS and not _is_arrow(text, i):
            depth -= 1
            if depth == 0:
                return i + 1
    return len(text)


def _find_keyword(text: str, word: str, start: int) -> int:
    """Find ``word`` as a keyword outside any bracket group, or -1.

    The keyword must not be part of a longer identifier and must be
    followed by whitespace, so ``for<'a>`` and ``Platform`` never match.
    ``where`` directly after a closing ``>`` still counts.
    """
    depth = 0
    i = start
    while i < len(text):
        char = text[i]
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS and not _is_arrow(text, i):
            depth = max(depth - 1, 0)
        elif depth == 0 and text.startswith(word, i) and _is_keyword_at(text, i, len(word)):
            return i
        i += 1
    return -1


def _is_keyword_at(text: str, i: int, length: int) -> bool:
    if i > 0 and (text[i - 1].isalnum() or text[i - 1] in "_'"):
        return False
    end = i + length
    return end == len(text) or text[end].isspace()


def _is_where(attrs: list[tuple[str, str | None]]) -> bool:
    """Elements classed ``where`` hold a where-clause set on its own line."""
    classes = next((value for name, value in attrs if name == "class"), None) or ""
    return "where" in classes.split()


def _is_arrow(text: str, i: int) -> bool:
    return text[i] == ">" and i > 0 and text[i - 1] == "-"
