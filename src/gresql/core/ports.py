from typing import Protocol

from gresql.core.models import Span


class ISegmenter(Protocol):
    """Protocol defining how raw file text is split into statement spans."""

    def segment(self, text: str) -> list[Span]:
        """Returns the non-empty spans of the text in source order."""
        ...


class IIdentifierNormalizer(Protocol):
    """Protocol defining how table identifiers are normalized before comparison."""

    def normalize(self, identifier: str) -> str:
        """Returns the identifier in its comparable form."""
        ...
