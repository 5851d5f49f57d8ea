"""Common module - errors and schemas."""
