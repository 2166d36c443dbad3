"""Default configuration values for mdbook-abbr."""

# Name reported to mdBook; also the [preprocessor.<name>] table in book.toml
PREPROCESSOR_NAME = "abbr"

# Dotted keys inside the mdBook context config
LIST_KEY = f"preprocessor.{PREPROCESSOR_NAME}.list"
FILE_KEY = f"preprocessor.{PREPROCESSOR_NAME}.file"

# Entry keys for the array-of-tables form of the list
ENTRY_ABBREVIATION_KEY = "abbr"
ENTRY_EXPANSION_KEY = "expanded"
