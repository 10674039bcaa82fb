"""Core functionality for xnd.

Registry resolution, the package store, manifest I/O and the installer.
"""
