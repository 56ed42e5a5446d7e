"""Core infrastructure: configuration, logging, database, pagination, exceptions."""
