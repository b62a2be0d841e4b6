"""
Exception handlers for the PitchDeck-AI server.

This package maps domain errors to HTTP responses and provides a setup
function to register them with the FastAPI application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
