"""Shared fixtures: generator-shaped fragments and a docs tree on disk."""

from pathlib import Path

import pytest
from samples import BITXOR_FRAGMENT, VISITOR_FRAGMENT, wrap_fragment


@pytest.fixture
def bitxor_js() -> str:
    return wrap_fragment(BITXOR_FRAGMENT)


@pytest.fixture
def visitor_js() -> str:
    return wrap_fragment(VISITOR_FRAGMENT)


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """A documentation root with two trait fragments under ``implementors/``."""
    bit = tmp_path / "implementors" / "core" / "ops" / "bit"
    bit.mkdir(parents=True)
    (bit / "trait.BitXor.js").write_text(wrap_fragment(BITXOR_FRAGMENT), encoding="utf-8")

    visit = tmp_path / "implementors" / "rustc_ast" / "visit"
    visit.mkdir(parents=True)
    (visit / "trait.Visitor.js").write_text(wrap_fragment(VISITOR_FRAGMENT), encoding="utf-8")
    return tmp_path
