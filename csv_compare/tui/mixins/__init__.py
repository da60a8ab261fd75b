"""Reusable mixins for TUI screens."""

from csv_compare.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "VimNavigationMixin",
]
