"""
API package. Versioned routers live under ``v1``.
"""
