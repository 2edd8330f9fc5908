"""Command line tools for drafting garment patterns."""
