"""Markdown conversion, page layout composition and output I/O."""
