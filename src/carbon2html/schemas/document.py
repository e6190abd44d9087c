"""Carbon document tree models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FormatRange(BaseModel):
    """A styling annotation over ``text[start:end]`` of the owning node.

    Offsets are code points. ``from``/``to`` are the JSON names.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: str
    start: int = Field(..., alias="from", ge=0)
    end: int = Field(..., alias="to", ge=0)
    attrs: dict[str, str] | None = None

    @field_validator("attrs", mode="before")
    @classmethod
    def stringify_attrs(cls, v: Any) -> Any:
        """Accept scalar attribute values and keep them as strings."""
        if isinstance(v, dict):
            return {str(key): "" if value is None else str(value) for key, value in v.items()}
        return v

    @model_validator(mode="after")
    def check_order(self) -> "FormatRange":
        if self.start > self.end:
            err = f"format '{self.type}' starts after it ends ({self.start} > {self.end})"
            raise ValueError(err)
        return self


class Node(BaseModel):
    """One element of a Carbon document tree.

    Renderer-specific keys (``src``, ``caption``, ``tagName`` ...) are kept
    as extra fields and read with :meth:`get`.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    component_type: str = Field(..., alias="component")
    paragraph_type: str | None = Field(default=None, alias="paragraphType")
    text: str | None = None
    formats: list[FormatRange] = Field(default_factory=list)
    children: list["Node"] | None = Field(default=None, alias="components")

    @field_validator("formats", mode="before")
    @classmethod
    def default_formats(cls, v: Any) -> Any:
        return [] if v is None else v

    def get(self, key: str, default: Any = None) -> Any:
        """Return an extra field, or *default* when absent or null."""
        value = (self.model_extra or {}).get(key)
        return default if value is None else value

    @property
    def text_length(self) -> int:
        return len(self.text) if self.text else 0


class CarbonDocument(BaseModel):
    """Top-level Carbon editor document."""

    model_config = ConfigDict(extra="allow")

    sections: list[Node]
