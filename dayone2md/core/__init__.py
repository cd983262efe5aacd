"""Core infrastructure: logging, exceptions, paths, temporary files."""
