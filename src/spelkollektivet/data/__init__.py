"""Bundled world definitions."""
