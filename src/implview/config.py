"""Viewer configuration.

ViewerConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from implview.errors import ConfigurationError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class ViewerConfig:
    """Viewer configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ViewerConfig(root_path="../../", current_crate="rustc_ast")
    """

    # Links
    root_path: str = "./"  # Prefix for relative hrefs in descriptor markup

    # Rendering
    current_crate: str | None = None  # Implementors already listed on the page
    show_synthetic: bool = True
    autoescape: bool = True

    # Fetch
    fetch_timeout: float = 10.0

    # Logging
    log_level: str = "warning"

    def __post_init__(self) -> None:
        if self.fetch_timeout <= 0:
            msg = f"fetch_timeout must be positive, got {self.fetch_timeout!r}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"Unknown log_level {self.log_level!r}. Expected one of: {', '.join(LOG_LEVELS)}"
            raise ConfigurationError(msg)
