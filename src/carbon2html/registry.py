"""Lookup of component renderers by Carbon type name."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from carbon2html.components import Component


def normalize_component_name(name: str) -> str:
    """Upper-case the first character: ``paragraph`` -> ``Paragraph``."""
    return name[:1].upper() + name[1:]


class ComponentRegistry:
    """Map normalized component names to renderer instances."""

    def __init__(self) -> None:
        self._components: dict[str, Component] = {}

    def register(self, name: str, component: Component) -> "ComponentRegistry":
        self._components[normalize_component_name(name)] = component
        return self

    def resolve(self, name: str) -> Component | None:
        return self._components.get(normalize_component_name(name))

    def names(self) -> list[str]:
        return sorted(self._components)

    def snapshot(self) -> Mapping[str, Component]:
        """Read-only copy used for the duration of one conversion."""
        return MappingProxyType(dict(self._components))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_component_name(name) in self._components

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._components)
