"""Wolfdog - static site generator for post/metadata pairs and Jinja2 templates."""

__version__ = "1.0.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

GENERATOR_TAG = f"Wolfdog Generator {__version__}"

# Re-export main CLI entry point
from .cli import main

__all__ = ["GENERATOR_TAG", "__version__", "main"]
