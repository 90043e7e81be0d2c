"""Command-line interface for reltag."""
