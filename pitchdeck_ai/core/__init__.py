"""
Core infrastructure: logging, monitoring, database layer and shared models.
"""
