"""Command-line interface for mdbook-abbr."""
