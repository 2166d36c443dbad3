"""Abbreviation models.

An AbbreviationSet is built once from configuration and handed to the
substitution engine by reference. Both models are frozen so the set cannot
change for the lifetime of a run.
"""

from collections.abc import Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AbbreviationEntry(BaseModel):
    """A single abbreviation and the text shown as its expansion."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    abbreviation: str = Field(
        ..., min_length=1, strict=True, description="Literal word to annotate"
    )
    expansion: str = Field(
        ..., strict=True, description="Inserted verbatim into the title attribute"
    )


class AbbreviationSet(BaseModel):
    """Ordered, immutable collection of abbreviation entries.

    Entries are applied in the order given. Duplicate abbreviations are
    rejected rather than resolved by position.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entries: tuple[AbbreviationEntry, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def check_unique(self) -> "AbbreviationSet":
        """Reject abbreviations that appear more than once."""
        seen: set[str] = set()
        for entry in self.entries:
            if entry.abbreviation in seen:
                raise ValueError(f"Duplicate abbreviation: {entry.abbreviation!r}")
            seen.add(entry.abbreviation)
        return self

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "AbbreviationSet":
        """Build a set from an abbreviation -> expansion mapping.

        Insertion order of the mapping becomes application order.
        """
        return cls(
            entries=tuple(
                AbbreviationEntry(abbreviation=abbr, expansion=expanded)
                for abbr, expanded in mapping.items()
            )
        )

    @classmethod
    def empty(cls) -> "AbbreviationSet":
        """Create a set with no entries (identity transform)."""
        return cls()

    def __iter__(self) -> Iterator[AbbreviationEntry]:  # type: ignore[override]
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)
