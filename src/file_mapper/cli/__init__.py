"""Command-line interface for file-mapper."""
