"""
PitchDeck-AI HTTP server.

FastAPI application exposing pitch deck generation, business validation,
authentication and saved decks under ``/api``.
"""
