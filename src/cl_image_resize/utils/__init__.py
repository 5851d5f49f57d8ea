"""Utility helpers: format detection and profiling."""
