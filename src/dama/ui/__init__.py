"""Presentation helpers (read-only projections of a session)."""

from dama.ui.text_board import render_board

__all__ = ["render_board"]
