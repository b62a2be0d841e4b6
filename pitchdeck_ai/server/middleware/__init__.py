"""
Middleware modules for the PitchDeck-AI server.
"""

from .request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
