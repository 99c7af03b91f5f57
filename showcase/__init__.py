"""Fetch-state lifecycle and derived views for catalog, user, blog and todo screens."""

__version__ = "0.1.0"
