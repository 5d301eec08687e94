"""Core infrastructure: configuration, logging, errors and date helpers."""
