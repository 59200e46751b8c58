"""
Caption text sources for VTTPlayer.

Reads raw SubRip/WebVTT text from local files, HTTP(S) URLs, or an element
embedded in an HTML page (captions shipped inside a ``<script>`` tag).
"""

import logging
from html.parser import HTMLParser
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)


def is_url(location: str) -> bool:
    """
    Check if a caption location is an HTTP(S) URL.

    Args:
        location: File path or URL

    Returns:
        True if location is an HTTP(S) URL, False otherwise
    """
    return location.startswith(("http://", "https://"))


def download_caption_text(url: str, timeout: int = 30, verify_ssl: bool = True) -> str:
    """
    Download caption text from an HTTP(S) URL.

    Args:
        url: URL of a .vtt or .srt file
        timeout: Request timeout in seconds (default: 30)
        verify_ssl: Whether to verify SSL certificates (default: True)

    Returns:
        Caption text as string

    Raises:
        requests.RequestException: If the request fails
    """
    logger.info(f"Downloading captions from URL: {url}")
    try:
        response = requests.get(url, timeout=timeout, verify=verify_ssl)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Failed to download captions from {url}: {str(e)}")
        raise

    logger.info(f"Downloaded {len(response.text)} characters of caption text")
    return response.text


def read_caption_text(location: str, timeout: int = 30) -> str:
    """
    Read caption text from a file path or HTTP(S) URL.

    Args:
        location: Local file path or HTTP(S) URL
        timeout: Request timeout in seconds for URLs (default: 30)

    Returns:
        Caption text as string

    Example:
        >>> text = read_caption_text("subtitles/episode1.srt")
        >>> text = read_caption_text("https://example.com/episode1.vtt")
    """
    if is_url(location):
        return download_caption_text(location, timeout=timeout)

    logger.debug(f"Reading captions from file: {location}")
    with open(location, 'r', encoding='utf-8') as f:
        return f.read()


class _ElementTextExtractor(HTMLParser):
    """Collects the raw text inside the first element with a given id."""

    def __init__(self, element_id: str):
        super().__init__(convert_charrefs=False)
        self.element_id = element_id
        self.found = False
        self.chunks: List[str] = []
        self._depth = 0
        self._tag: Optional[str] = None

    def handle_starttag(self, tag, attrs):
        if self._depth:
            if tag == self._tag:
                self._depth += 1
            self.chunks.append(self.get_starttag_text())
            return
        if not self.found and dict(attrs).get("id") == self.element_id:
            self.found = True
            self._tag = tag
            self._depth = 1

    def handle_endtag(self, tag):
        if not self._depth:
            return
        if tag == self._tag:
            self._depth -= 1
            if not self._depth:
                return
        self.chunks.append(f"</{tag}>")

    def handle_data(self, data):
        if self._depth:
            self.chunks.append(data)

    def handle_entityref(self, name):
        if self._depth:
            self.chunks.append(f"&{name};")

    def handle_charref(self, name):
        if self._depth:
            self.chunks.append(f"&#{name};")


def extract_embedded_captions(page: str, element_id: str = "inputfile") -> str:
    """
    Extract caption text embedded in an HTML document.

    Pages that bundle their captions usually place them in a
    ``<script type="text/vtt" id="...">`` element. The element's inner markup
    is returned verbatim, entities included, the way innerHTML reads it.

    Args:
        page: HTML document as string
        element_id: id attribute of the element holding the captions

    Returns:
        Caption text as string

    Raises:
        ValueError: If no element with that id exists
    """
    extractor = _ElementTextExtractor(element_id)
    extractor.feed(page)
    extractor.close()

    if not extractor.found:
        raise ValueError(f"No element with id {element_id!r} in document")

    return "".join(extractor.chunks)
