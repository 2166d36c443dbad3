"""Tests for mdBook book traversal helpers."""

from typing import Any

import pytest

from mdbook_abbr.lib.book import for_each_chapter, iter_chapters
from mdbook_abbr.lib.errors import InputError


@pytest.mark.unit
class TestIterChapters:
    """Tests for iter_chapters()."""

    def test_visits_nested_chapters_depth_first(self, sample_book) -> None:
        """Parents come before their sub-items."""
        names = [chapter["name"] for chapter in iter_chapters(sample_book)]
        assert names == ["Intro", "Styling", "Selectors"]

    def test_skips_separators_and_part_titles(self, sample_book) -> None:
        """Only Chapter items are yielded."""
        chapters = list(iter_chapters(sample_book))
        assert all("content" in chapter for chapter in chapters)
        assert len(chapters) == 3

    def test_supports_items_key(self, make_chapter) -> None:
        """mdBook 0.5 books list items under 'items'."""
        book = {"items": [make_chapter("One", "x"), make_chapter("Two", "y")]}
        assert [c["name"] for c in iter_chapters(book)] == ["One", "Two"]

    def test_missing_sub_items_is_tolerated(self) -> None:
        """Chapters without sub_items are leaves."""
        book = {"sections": [{"Chapter": {"name": "Solo", "content": ""}}]}
        assert [c["name"] for c in iter_chapters(book)] == ["Solo"]

    def test_empty_book(self) -> None:
        """A book with no items yields nothing."""
        assert list(iter_chapters({"sections": []})) == []

    def test_missing_item_list_raises(self) -> None:
        """A book without items or sections is rejected."""
        with pytest.raises(InputError):
            list(iter_chapters({"chapters": []}))

    def test_non_list_item_field_raises(self) -> None:
        """The item field must be a list."""
        with pytest.raises(InputError):
            list(iter_chapters({"sections": {"Chapter": {}}}))

    @pytest.mark.parametrize("chapter", [None, "Intro", ["Intro"]])
    def test_non_object_chapter_raises(self, chapter) -> None:
        """A Chapter item must hold an object."""
        with pytest.raises(InputError):
            list(iter_chapters({"sections": [{"Chapter": chapter}]}))

    def test_non_list_sub_items_raises(self) -> None:
        """sub_items must be a list and the error names the chapter."""
        book = {
            "sections": [
                {"Chapter": {"name": "Parent", "content": "", "sub_items": "x"}}
            ]
        }
        with pytest.raises(InputError) as exc_info:
            list(iter_chapters(book))
        assert "Parent" in str(exc_info.value)

    def test_non_string_content_raises(self, make_chapter) -> None:
        """Nested chapters with non-string content are rejected."""
        child = {"Chapter": {"name": "Child", "content": 5}}
        book = {"sections": [make_chapter("Parent", "ok", sub_items=[child])]}
        with pytest.raises(InputError) as exc_info:
            list(iter_chapters(book))
        assert "Child" in str(exc_info.value)


@pytest.mark.unit
class TestForEachChapter:
    """Tests for for_each_chapter()."""

    def test_callback_can_modify_chapters_in_place(self, sample_book) -> None:
        """Changes made by the callback are visible in the book."""

        def _upper(chapter: dict[str, Any]) -> None:
            chapter["content"] = chapter["content"].upper()

        for_each_chapter(sample_book, _upper)

        nested = sample_book["sections"][3]["Chapter"]["sub_items"][0]["Chapter"]
        assert nested["content"] == "EVERY CSS SELECTOR."
        assert sample_book["sections"][0]["Chapter"]["content"] == (
            "WELCOME TO HTML AND CSS."
        )

    def test_non_chapter_items_untouched(self, sample_book) -> None:
        """Separators and part titles are left as they are."""
        for_each_chapter(sample_book, lambda chapter: None)
        assert sample_book["sections"][1] == "Separator"
        assert sample_book["sections"][2] == {"PartTitle": "Reference HTML"}
