"""Bundled npm command catalog."""
