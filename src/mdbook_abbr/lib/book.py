"""Traversal helpers for the mdBook book structure.

The book is kept as the decoded JSON dict so fields this preprocessor does
not know about are written back unchanged. Items are one of::

    {"Chapter": {"name": ..., "content": ..., "sub_items": [...], ...}}
    "Separator"
    {"PartTitle": "..."}

mdBook 0.5 stores the top-level items under ``items``; earlier releases use
``sections``.
"""

from collections.abc import Callable, Iterator
from typing import Any

from mdbook_abbr.lib.errors import InputError

BOOK_ITEM_KEYS = ("items", "sections")


def _top_level_items(book: dict[str, Any]) -> list[Any]:
    for key in BOOK_ITEM_KEYS:
        if key in book:
            items = book[key]
            if not isinstance(items, list):
                raise InputError(f"Book field '{key}' must be a list")
            return items
    raise InputError(
        f"Book has no item list (expected one of: {', '.join(BOOK_ITEM_KEYS)})"
    )


def _check_chapter(chapter: Any) -> dict[str, Any]:
    if not isinstance(chapter, dict):
        raise InputError(f"Chapter must be an object, got {type(chapter).__name__}")
    name = chapter.get("name", "<unnamed>")
    content = chapter.get("content")
    if content is not None and not isinstance(content, str):
        raise InputError(
            f"Chapter '{name}' has non-string content "
            f"({type(content).__name__})"
        )
    sub_items = chapter.get("sub_items")
    if sub_items is not None and not isinstance(sub_items, list):
        raise InputError(f"Chapter '{name}' has sub_items that is not a list")
    return chapter


def _walk(items: list[Any]) -> Iterator[dict[str, Any]]:
    for item in items:
        if not isinstance(item, dict) or "Chapter" not in item:
            continue
        chapter = _check_chapter(item["Chapter"])
        yield chapter
        yield from _walk(chapter.get("sub_items") or [])


def iter_chapters(book: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """Yield every chapter dict, depth first, parents before children."""
    return _walk(_top_level_items(book))


def for_each_chapter(
    book: dict[str, Any], func: Callable[[dict[str, Any]], None]
) -> None:
    """Call ``func`` on every chapter in the book."""
    for chapter in iter_chapters(book):
        func(chapter)

