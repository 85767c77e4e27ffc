"""implview exception hierarchy.

Shared across the loader, dispatcher, registry, and renderer so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class ImplviewError(Exception):
    """Base for all implview-specific errors."""


class ConfigurationError(ImplviewError):
    """Raised when viewer configuration is invalid or a registry is misused."""


@dataclass(frozen=True, slots=True)
class FragmentError(ImplviewError):
    """A fragment could not be loaded.

    Fragments come from a trusted generator, so this is fatal: the loader
    never returns a partial index.
    """

    detail: str
    source: str = "<fragment>"

    def __str__(self) -> str:
        return f"{self.source}: {self.detail}"


class DispatchError(ImplviewError):
    """Raised when the render dispatcher is used out of contract.

    The dispatcher has exactly one renderer slot; registering a second
    renderer is a programming error.
    """
