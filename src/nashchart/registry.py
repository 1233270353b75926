from .exceptions import UnsupportedSourceError
from .sources.base import SourceAdapter
from .sources.web import HttpSource
from .sources.local import LocalFileSource

_SOURCES: list[type[SourceAdapter]] = [
    HttpSource,
    LocalFileSource,
]


def get_source(location: str) -> SourceAdapter:
    """Return an instantiated source adapter for the given location.

    Raises UnsupportedSourceError if no adapter matches.
    """
    for cls in _SOURCES:
        if cls.can_handle(location):
            return cls()
    raise UnsupportedSourceError(location)
