"""Validation utilities for mdbook-abbr configuration."""

from pydantic import ValidationError as PydanticValidationError


def flatten_pydantic_errors(
    exc: PydanticValidationError, location: str | None = None
) -> list[str]:
    """Flatten a Pydantic ValidationError into human-readable messages.

    Abbreviation entries are validated one at a time, so the error location
    from Pydantic is just the field name (``abbreviation``). ``location`` is
    prefixed to it to point at the offending entry in book.toml.

    Args:
        exc: Pydantic ValidationError exception
        location: Config path of the entry, e.g. ``preprocessor.abbr.list[2]``

    Returns:
        List of human-readable error messages, one per field error

    Example:
        >>> from mdbook_abbr.models.abbreviation import AbbreviationEntry
        >>> try:
        ...     AbbreviationEntry(abbreviation="", expansion="x")
        ... except PydanticValidationError as e:
        ...     msgs = flatten_pydantic_errors(e, "preprocessor.abbr.list[0]")
        ...     # ["preprocessor.abbr.list[0].abbreviation: String should ..."]
    """
    errors: list[str] = []

    for error in exc.errors():
        parts = [str(item) for item in error.get("loc", ())]
        if location:
            parts.insert(0, location)
        field_path = ".".join(parts) if parts else "unknown"

        msg = error.get("msg", "Unknown error")
        if error.get("type", "") == "string_type":
            msg = f"{msg} (received: {error.get('input')!r})"

        errors.append(f"{field_path}: {msg}")

    return errors if errors else ["Validation failed with unknown error"]
