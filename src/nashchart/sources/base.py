from abc import ABC, abstractmethod

from ..models import SourceDocument


class SourceAdapter(ABC):
    """Abstract base class for chord-sheet sources (files, URLs)."""

    @classmethod
    @abstractmethod
    def can_handle(cls, location: str) -> bool:
        """Return True if this adapter can read the given location."""

    @abstractmethod
    def fetch(self, location: str) -> SourceDocument:
        """Read the chord sheet at *location*.

        PDFs are recognised but not read: the document comes back with
        ``is_pdf=True`` and empty content.

        Raises FetchError or SourceError when the location cannot be read.
        """
