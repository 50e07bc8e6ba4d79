"""Core infrastructure: configuration, logging, errors, validation and storage."""
