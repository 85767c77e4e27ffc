"""implview — load and render documentation implementors indexes.

A documentation generator writes one fragment per trait listing, per
crate, every type that implements it. implview parses those fragments
into immutable ``TraitIndex`` values, hands each one to a render
callback, and renders the implementors section as HTML.

Basic usage::

    from implview import Viewer

    viewer = Viewer()

    @viewer.on_render
    def show(index):
        print(index.trait, index.count)

    viewer.load_file("doc/implementors/rustc_ast/visit/trait.Visitor.js")

Parsing on its own::

    from implview.loader import parse_fragment

    index = parse_fragment(text, trait="rustc_ast::visit::Visitor")
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DispatchError",
    "FragmentError",
    "ImplementorEntry",
    "ImplementorsRegistry",
    "ImplviewError",
    "PendingRegistry",
    "RenderDispatcher",
    "TraitIndex",
    "Viewer",
    "ViewerConfig",
    "parse_fragment",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import implview`` fast while providing a clean top-level API.
    """
    if name == "Viewer":
        from implview.viewer import Viewer

        return Viewer

    if name == "ViewerConfig":
        from implview.config import ViewerConfig

        return ViewerConfig

    if name in ("ImplementorEntry", "ImplementorsRegistry", "TraitIndex"):
        from implview import index as _index

        return getattr(_index, name)

    if name in ("PendingRegistry", "RenderDispatcher"):
        from implview import dispatch as _dispatch

        return getattr(_dispatch, name)

    if name == "parse_fragment":
        from implview.loader.fragment import parse_fragment

        return parse_fragment

    if name in ("ConfigurationError", "DispatchError", "FragmentError", "ImplviewError"):
        from implview import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
