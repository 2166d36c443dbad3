"""Typed view of the context object mdBook sends to preprocessors."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PreprocessorContext(BaseModel):
    """First element of the ``[context, book]`` array read from stdin.

    Only the fields this preprocessor reads are declared; anything else mdBook
    adds is kept as extra data.
    """

    model_config = ConfigDict(extra="allow")

    root: str = Field(".", description="Book root directory")
    config: dict[str, Any] = Field(
        default_factory=dict, description="Parsed book.toml"
    )
    renderer: str = Field("html", description="Renderer being run")
    mdbook_version: str | None = Field(
        None, description="Version of mdBook invoking the preprocessor"
    )

    def get(self, key: str) -> Any | None:
        """Look up a dotted key in the book configuration.

        Args:
            key: Dotted path such as ``preprocessor.abbr.list``

        Returns:
            The value at that path, or None if any segment is missing
        """
        node: Any = self.config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node
