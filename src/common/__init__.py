"""Shared helpers: logging setup and CI runner publishing."""
