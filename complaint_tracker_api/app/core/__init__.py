"""Core infrastructure: configuration, logging, errors, store and security."""
