"""Bundled default data files."""
