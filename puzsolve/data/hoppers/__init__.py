"""Hoppers boards."""
