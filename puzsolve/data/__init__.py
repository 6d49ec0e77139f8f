"""Bundled puzzle files."""
