"""Layout configuration shared by the compositor and the widgets."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_ELLIPSIS = "..."
DEFAULT_INDENT = 3
DEFAULT_TITLE_DECORATION = "***"


@dataclass
class LayoutConfig:
    """Layout settings.

    ``indent`` is the number of spaces that prefix continuation fields,
    ``ellipsis`` marks truncated text and ``title_decoration`` frames each
    title line.
    """

    ellipsis: str = DEFAULT_ELLIPSIS
    indent: int = DEFAULT_INDENT
    title_decoration: str = DEFAULT_TITLE_DECORATION

    @classmethod
    def from_env(cls) -> LayoutConfig:
        """Build a config, honouring ``PI_TEXTFIT_*`` environment overrides."""
        config = cls()

        ellipsis = os.environ.get("PI_TEXTFIT_ELLIPSIS")
        if ellipsis:
            config.ellipsis = ellipsis

        indent = os.environ.get("PI_TEXTFIT_INDENT")
        if indent:
            try:
                value = int(indent)
            except ValueError:
                value = -1
            if value >= 0:
                config.indent = value

        return config


_config: LayoutConfig | None = None


def get_config() -> LayoutConfig:
    """Return the process-wide config, loading it from the environment once."""
    global _config
    if _config is None:
        _config = LayoutConfig.from_env()
    return _config


def set_config(config: LayoutConfig | None) -> None:
    """Replace the process-wide config (``None`` reloads from the environment)."""
    global _config
    _config = config
