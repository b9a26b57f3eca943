"""Command-line interface for svg-codeshot."""
