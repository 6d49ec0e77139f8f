"""Capture-chess boards."""
