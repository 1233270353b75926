"""Source adapter for chord sheets served over HTTP(S).

Three kinds of response are understood, by ``Content-Type``:

  - ``application/pdf``   → recognised as a PDF, body discarded
  - ``text/html``         → text of the ``<pre>`` blocks, or the page text
                            when there are none
  - anything else         → the body as text
"""

import logging
from urllib.parse import unquote, urlparse

import httpx
from bs4 import BeautifulSoup

from ..exceptions import FetchError
from ..metadata import is_pdf_file
from ..models import SourceDocument
from .base import SourceAdapter

logger = logging.getLogger(__name__)

_FETCH_HEADERS = {
    "Accept": "text/plain,text/html;q=0.9,application/pdf;q=0.8,*/*;q=0.5",
}


class HttpSource(SourceAdapter):
    """Fetch chord sheets from http:// and https:// URLs."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return urlparse(location).scheme in ("http", "https")

    def fetch(self, location: str) -> SourceDocument:
        try:
            resp = httpx.get(
                location,
                headers=_FETCH_HEADERS,
                follow_redirects=True,
                timeout=15,
            )
        except httpx.RequestError as exc:
            raise FetchError(location, 0) from exc
        if resp.status_code != 200:
            raise FetchError(location, resp.status_code)

        mime_type = resp.headers.get("content-type", "").split(";")[0].strip().lower() or None
        file_name = _file_name_from_url(location)

        if is_pdf_file(file_name, mime_type):
            logger.info("Detected PDF at %s, not reading text", location)
            return SourceDocument(
                content="",
                file_name=file_name,
                location=location,
                mime_type=mime_type,
                is_pdf=True,
            )

        content = resp.text
        if mime_type == "text/html":
            content = html_to_text(content)
        logger.debug("Fetched %d characters from %s", len(content), location)

        return SourceDocument(
            content=content,
            file_name=file_name,
            location=location,
            mime_type=mime_type,
        )


def html_to_text(html: str) -> str:
    """Return the chord-sheet text of an HTML page.

    Chord sheets on the web almost always live in ``<pre>`` blocks, which keep
    the column alignment; when a page has none, fall back to its visible text.
    """
    soup = BeautifulSoup(html, "html.parser")
    blocks = [pre.get_text() for pre in soup.find_all("pre")]
    if blocks:
        return "\n\n".join(blocks)
    for tag in soup(["script", "style"]):
        tag.decompose()
    body = soup.body or soup
    return body.get_text("\n")


def _file_name_from_url(url: str) -> str:
    """Last path segment of *url*, e.g. ``amazing-grace.cho``."""
    return unquote(urlparse(url).path.rstrip("/").split("/")[-1])
