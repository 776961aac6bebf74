"""Exceptions raised by componentkit."""


class InvalidTag(ValueError):
    """Raised when a template or instance is constructed with an empty tag."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Tag must not be empty or whitespace: {tag!r}")
        self.tag = tag


class LibraryError(ValueError):
    """Structural problem in a template library declaration."""


class UnknownTemplate(LibraryError, KeyError):
    """A component or template refers to a template that was never declared."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown template: {name!r}")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


__all__ = ["InvalidTag", "LibraryError", "UnknownTemplate"]
