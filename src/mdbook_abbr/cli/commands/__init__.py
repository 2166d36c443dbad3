"""Subcommands of the mdbook-abbr CLI."""
