"""Markdown subset to HTML: parser, renderer and a small HTTP service."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
