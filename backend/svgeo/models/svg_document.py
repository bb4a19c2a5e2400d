"""Parsed SVG document model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PathElement(BaseModel):
    """One drawable <path>, attributes keyed by their prefixed names (``inkscape:label``)."""

    attributes: dict[str, str] = Field(default_factory=dict)

    @property
    def path_data(self) -> str | None:
        return self.attributes.get("d")

    def get(self, name: str) -> str | None:
        return self.attributes.get(name)


class SvgDocument(BaseModel):
    """Root container plus its <path> elements in document order."""

    width: float | None = None
    height: float | None = None
    viewbox_height: float | None = None
    paths: list[PathElement] = Field(default_factory=list)

    @property
    def reference_height(self) -> float | None:
        """Height used to flip Y: explicit ``height`` first, then the viewBox height."""
        if self.height is not None:
            return self.height
        return self.viewbox_height
