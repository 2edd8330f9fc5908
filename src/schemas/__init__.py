"""Packaged JSON schemas and payload validators."""
