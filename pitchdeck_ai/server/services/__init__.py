"""
Server services: orchestration, sessions, usage quotas and API dependencies.
"""
