"""Report generation modules."""

from .markdown import render_pitch_deck_markdown, render_validation_markdown

__all__ = [
    "render_pitch_deck_markdown",
    "render_validation_markdown",
]
