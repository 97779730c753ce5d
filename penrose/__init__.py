"""Building blocks for a tiling window manager: layouts, hooks, key binding actions and process helpers."""

__version__ = "0.1.0"
__all__ = ["actions", "helpers", "hooks", "layout"]