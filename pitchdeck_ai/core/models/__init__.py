"""Domain and I/O models shared across the application."""
