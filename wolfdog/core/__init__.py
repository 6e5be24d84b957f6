"""Manifest, path and post-corpus handling."""
