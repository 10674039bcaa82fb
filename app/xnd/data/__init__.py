"""Bundled data files for xnd."""
