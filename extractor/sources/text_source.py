"""Paper text sources: local files, stdin, or a URL fetched over HTTP."""

import logging
import sys
from pathlib import Path

import httpx

from extractor.errors import SourceError

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 30.0  # seconds


def read_text_file(path: Path) -> str:
    """Read a UTF-8 text file, replacing undecodable bytes."""
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceError(str(path), e.strerror or str(e)) from e
    logger.info("Read %d characters from %s", len(text), path)
    return text


def read_stdin() -> str:
    return sys.stdin.read()


def fetch_text(url: str) -> str:
    """Fetch paper text from *url* (plain text or an HTML page body)."""
    try:
        response = httpx.get(url, timeout=FETCH_TIMEOUT, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise SourceError(url, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise SourceError(url, str(e) or type(e).__name__) from e
    logger.info("Fetched %d characters from %s", len(response.text), url)
    return response.text
