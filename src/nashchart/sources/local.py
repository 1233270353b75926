"""Source adapter for chord sheets on the local filesystem.

Accepts plain paths (``songs/amazing-grace.txt``) and ``file://`` URLs.
Text is decoded as UTF-8 (a leading BOM is dropped); PDF files are only
recognised, never opened.
"""

import logging
import mimetypes
from pathlib import Path
from urllib.parse import unquote, urlparse

from ..exceptions import SourceError
from ..metadata import is_pdf_file
from ..models import SourceDocument
from .base import SourceAdapter

logger = logging.getLogger(__name__)


class LocalFileSource(SourceAdapter):
    """Read chord sheets from local files."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        scheme = urlparse(location).scheme
        # Single-letter schemes are Windows drive letters ("C:\\songs\\...")
        return scheme in ("", "file") or len(scheme) == 1

    def fetch(self, location: str) -> SourceDocument:
        path = _to_path(location)
        mime_type, _ = mimetypes.guess_type(path.name)

        if is_pdf_file(path.name, mime_type):
            if not path.is_file():
                raise SourceError(location, "no such file")
            logger.info("Detected PDF file %s, not reading text", path)
            return SourceDocument(
                content="",
                file_name=path.name,
                location=location,
                mime_type=mime_type,
                is_pdf=True,
            )

        logger.debug("Reading text file %s", path)
        try:
            content = path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as exc:
            raise SourceError(location, "no such file") from exc
        except UnicodeDecodeError as exc:
            raise SourceError(location, "not a UTF-8 text file") from exc
        except OSError as exc:
            raise SourceError(location, exc.strerror or str(exc)) from exc

        return SourceDocument(
            content=content,
            file_name=path.name,
            location=location,
            mime_type=mime_type,
        )


def _to_path(location: str) -> Path:
    if location.startswith("file://"):
        return Path(unquote(urlparse(location).path))
    return Path(location).expanduser()
