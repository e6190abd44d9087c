"""Custom exceptions for carbon2html."""


class Carbon2htmlError(Exception):
    """Base exception for carbon2html operations."""


class ParseError(Carbon2htmlError):
    """Input is not valid JSON."""


class StructureError(Carbon2htmlError):
    """Decoded input does not have the shape of a Carbon document."""


class MissingSectionsError(StructureError):
    """Document has no top-level ``sections`` list."""


class UnknownComponentError(StructureError):
    """A node references a component with no registered renderer."""

    def __init__(self, component: str) -> None:
        self.component = component
        super().__init__(
            f"The JSON contains the component '{component}', but that isn't loaded."
        )


class SanitizationError(Carbon2htmlError):
    """Inline markup could not be built or parsed after tag insertion."""
