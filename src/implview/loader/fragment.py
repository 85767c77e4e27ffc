"""Fragment parsing.

A fragment is one file's worth of trait-to-implementors data, written by
the documentation generator as a small JavaScript wrapper::

    (function() {var implementors = {
    "rustc_ast":[["impl <a class=\\"trait\\" ...>BitXor</a> for ..."]],
    ...
    };if (window.register_implementors) {window.register_implementors(implementors);}
    else {window.pending_implementors = implementors;}})()

The object literal is JSON, so the wrapper is located with a regex and
the payload is handed to ``json``. Plain JSON text and already-decoded
mappings are accepted too.

Parsing is total over well-formed input. Anything else raises
``FragmentError``; there is no partial result.
"""

import json
import logging
import re
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import replace
from pathlib import Path
from typing import Any

from implview.errors import FragmentError
from implview.index.entry import ImplementorEntry
from implview.index.trait_index import TraitIndex

logger = logging.getLogger("implview.loader")

_ASSIGNMENT = re.compile(r"\b(?:var|let|const)\s+implementors\s*=\s*")
_FROM_ENTRIES = "Object.fromEntries("
_FILE_PREFIX = "trait."
_FILE_SUFFIX = ".js"

type FragmentSource = str | bytes | Mapping[str, Any]


class _DuplicateKeyError(ValueError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key


def _unique_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise _DuplicateKeyError(key)
        result[key] = value
    return result


_DECODER = json.JSONDecoder(object_pairs_hook=_unique_pairs)


def parse_fragment(
    source: FragmentSource,
    *,
    trait: str | None = None,
    label: str = "<fragment>",
) -> TraitIndex:
    """Parse a fragment into a ``TraitIndex``.

    Args:
        source: The generator's JavaScript wrapper, JSON text, or a
            decoded ``module -> descriptors`` mapping.
        trait: Trait path to tag the index with (``core::ops::bit::BitXor``).
        label: Name used in error messages (usually the file path or URL).

    Raises:
        FragmentError: The fragment is malformed.
    """
    if isinstance(source, bytes):
        try:
            source = source.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FragmentError(f"fragment is not valid UTF-8: {exc.reason}", label) from exc

    if isinstance(source, str):
        items = _decode_text(source, label)
    elif isinstance(source, Mapping):
        items = list(source.items())
    else:
        raise FragmentError(f"unsupported fragment type {type(source).__name__}", label)

    modules: dict[str, list[ImplementorEntry]] = {}
    for module, descriptors in items:
        if not isinstance(module, str):
            raise FragmentError(f"module name must be a string, got {module!r}", label)
        if module in modules:
            raise FragmentError(f"duplicate module {module!r}", label)
        if isinstance(descriptors, str) or not isinstance(descriptors, Sequence):
            raise FragmentError(f"implementors of {module!r} must be a list", label)
        modules[module] = [_parse_descriptor(module, d, label) for d in descriptors]

    index = TraitIndex(modules, trait=trait)
    logger.debug("Parsed %s: %d modules, %d implementors", label, len(index), index.count)
    return index


def trait_path_from_file(path: str | Path, root: str | Path | None = None) -> str:
    """Derive the trait path from a fragment's location.

    ``implementors/rustc_ast/visit/trait.Visitor.js`` becomes
    ``rustc_ast::visit::Visitor``. Directories count from the last
    ``implementors`` component; without one, from ``root``.
    """
    path = Path(path)
    name = path.name
    if not (name.startswith(_FILE_PREFIX) and name.endswith(_FILE_SUFFIX)) or len(name) <= len(
        _FILE_PREFIX + _FILE_SUFFIX
    ):
        raise FragmentError("not a trait fragment file (expected trait.<Name>.js)", str(path))
    trait_name = name[len(_FILE_PREFIX) : -len(_FILE_SUFFIX)]

    if root is not None:
        try:
            parts = path.parent.relative_to(root).parts
        except ValueError as exc:
            raise FragmentError(f"fragment is outside {str(root)!r}", str(path)) from exc
    else:
        parts = path.parent.parts

    if "implementors" in parts:
        last = len(parts) - 1 - parts[::-1].index("implementors")
        parts = parts[last + 1 :]
    elif root is None:
        parts = ()

    return "::".join([*parts, trait_name])


def load_fragment_file(path: str | Path, *, root: str | Path | None = None) -> TraitIndex:
    """Read and parse one ``trait.<Name>.js`` file."""
    path = Path(path)
    trait = trait_path_from_file(path, root)
    return parse_fragment(path.read_bytes(), trait=trait, label=str(path))


def iter_fragment_files(root: str | Path) -> Iterator[Path]:
    """Yield every ``trait.*.js`` file under ``root``, sorted by path."""
    yield from sorted(p for p in Path(root).rglob(f"{_FILE_PREFIX}*{_FILE_SUFFIX}") if p.is_file())


# -- decoding -----------------------------------------------------------------


def _decode_text(text: str, label: str) -> list[tuple[Any, Any]]:
    stripped = text.lstrip()
    if stripped.startswith("{"):
        payload, end = _decode_json(stripped, 0, label)
        if stripped[end:].strip():
            raise FragmentError("unexpected data after JSON object", label)
        from_entries = False
    else:
        match = _ASSIGNMENT.search(text)
        if match is None:
            raise FragmentError("no `implementors` assignment found", label)
        pos = match.end()
        from_entries = text.startswith(_FROM_ENTRIES, pos)
        if from_entries:
            pos += len(_FROM_ENTRIES)
        payload, _ = _decode_json(text, pos, label)

    if from_entries:
        return _entry_pairs(payload, label)
    if not isinstance(payload, dict):
        raise FragmentError("implementors must be an object", label)
    return list(payload.items())


def _decode_json(text: str, pos: int, label: str) -> tuple[Any, int]:
    try:
        return _DECODER.raw_decode(text, pos)
    except _DuplicateKeyError as exc:
        raise FragmentError(f"duplicate key {exc.key!r}", label) from exc
    except json.JSONDecodeError as exc:
        raise FragmentError(f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}", label) from exc


def _entry_pairs(payload: Any, label: str) -> list[tuple[Any, Any]]:
    if not isinstance(payload, list):
        raise FragmentError("Object.fromEntries() argument must be an array", label)
    pairs: list[tuple[Any, Any]] = []
    for pair in payload:
        if not isinstance(pair, list) or len(pair) != 2:
            raise FragmentError(f"expected [module, implementors] pair, got {pair!r}", label)
        pairs.append((pair[0], pair[1]))
    return pairs


def _parse_descriptor(module: str, descriptor: Any, label: str) -> ImplementorEntry:
    if isinstance(descriptor, str):
        return ImplementorEntry.from_markup(module, descriptor)
    if isinstance(descriptor, Mapping):
        return _parse_mapping_descriptor(module, descriptor, label)
    if isinstance(descriptor, Sequence) and 1 <= len(descriptor) <= 3:
        markup = descriptor[0]
        if not isinstance(markup, str):
            raise FragmentError(f"descriptor markup in {module!r} must be a string", label)
        synthetic = _flag(descriptor[1], module, label) if len(descriptor) > 1 else False
        types = _types(descriptor[2], module, label) if len(descriptor) > 2 else ()
        return ImplementorEntry.from_markup(module, markup, synthetic=synthetic, types=types)
    raise FragmentError(f"unrecognised descriptor in {module!r}: {descriptor!r}", label)


def _parse_mapping_descriptor(module: str, descriptor: Mapping[str, Any], label: str) -> ImplementorEntry:
    declared = descriptor.get("module", module)
    if declared != module:
        raise FragmentError(f"descriptor declares module {declared!r} under key {module!r}", label)

    signature = descriptor.get("signature")
    if not isinstance(signature, str):
        raise FragmentError(f"descriptor in {module!r} needs a string 'signature'", label)

    markup = descriptor.get("markup")
    synthetic = _flag(descriptor.get("synthetic", False), module, label)
    types = _types(descriptor.get("types", []), module, label)
    if markup is None:
        entry = ImplementorEntry.from_signature(module, signature)
        entry = replace(entry, synthetic=synthetic, types=types)
    elif isinstance(markup, str):
        entry = ImplementorEntry.from_markup(module, markup, synthetic=synthetic, types=types)
        entry = replace(entry, signature=signature)
    else:
        raise FragmentError(f"descriptor markup in {module!r} must be a string", label)

    overrides: dict[str, str] = {}
    for key in ("trait", "impl"):
        value = descriptor.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise FragmentError(f"descriptor {key!r} in {module!r} must be a string", label)
        overrides[key] = value
    return replace(entry, **overrides) if overrides else entry


def _flag(value: Any, module: str, label: str) -> bool:
    if isinstance(value, bool) or value in (0, 1):
        return bool(value)
    raise FragmentError(f"synthetic flag in {module!r} must be 0, 1 or a boolean", label)


def _types(value: Any, module: str, label: str) -> tuple[str, ...]:
    if isinstance(value, list) and all(isinstance(t, str) for t in value):
        return tuple(value)
    raise FragmentError(f"types in {module!r} must be a list of strings", label)
