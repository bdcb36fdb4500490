"""
Goodreads API client.

Fetches a user's review list (OAuth 1.0a signed, XML response) and extracts
the book on the "currently-reading" shelf.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

import httpx
from oauthlib.oauth1 import SIGNATURE_HMAC_SHA1, SIGNATURE_TYPE_AUTH_HEADER, Client

from homeboard.core.config.models import GoodreadsConfig
from homeboard.core.content.models import Book

logger = logging.getLogger(__name__)

CURRENTLY_READING_SHELF = "currently-reading"
UNKNOWN_TITLE = "Unknown Book"


class GoodreadsError(Exception):
    """The Goodreads lookup failed."""


class GoodreadsCredentialsError(GoodreadsError):
    """Key, secret or user id is not configured."""


class GoodreadsClient:
    """
    Minimal Goodreads client.

    Only the consumer key and secret are used for signing; the review list
    of a public profile does not need a user token.

    Example:
        >>> client = GoodreadsClient(config.goodreads)
        >>> book = await client.get_currently_reading()
    """

    def __init__(
        self,
        config: GoodreadsConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not config.has_credentials:
            raise GoodreadsCredentialsError("Goodreads credentials not configured")
        self.config = config
        self._transport = transport
        self._signer = Client(
            config.key,
            client_secret=config.secret,
            signature_method=SIGNATURE_HMAC_SHA1,
            signature_type=SIGNATURE_TYPE_AUTH_HEADER,
        )

    @property
    def review_list_url(self) -> str:
        return f"{self.config.base_url}/review/list/{self.config.user_id}.xml"

    def _signed_headers(self, url: str) -> dict[str, str]:
        _, headers, _ = self._signer.sign(url, http_method="GET")
        return dict(headers)

    async def fetch_review_list(self) -> str:
        """
        Fetch the raw review list XML.

        Raises:
            GoodreadsError: On network failure, an invalid URL or a non-success status
        """
        url = self.review_list_url

        try:
            headers = self._signed_headers(url)
            async with httpx.AsyncClient(
                transport=self._transport, follow_redirects=True
            ) as client:
                response = await client.get(url, headers=headers)
        except httpx.RequestError as e:
            raise GoodreadsError(f"Goodreads request failed: {e}") from e
        except (httpx.InvalidURL, OSError, OverflowError, ValueError) as e:
            # Bad base_url or user_id, rejected by the signer or by httpx
            raise GoodreadsError(f"Invalid Goodreads URL {url}: {e}") from e

        if not response.is_success:
            raise GoodreadsError(f"Goodreads API error: {response.status_code}")

        return response.text

    async def get_currently_reading(self) -> Book | None:
        """
        Return the book on the currently-reading shelf, or None if the shelf is empty.

        Raises:
            GoodreadsError: If the request fails or the response is not valid XML
        """
        xml_text = await self.fetch_review_list()
        return parse_currently_reading(xml_text)


def _shelf_names(review: ET.Element) -> set[str]:
    shelves = review.find("shelves")
    if shelves is None:
        return set()
    return {shelf.get("name", "") for shelf in shelves.iter("shelf")}


def _parse_pages(raw: str | None) -> int:
    if raw is None:
        return 0
    try:
        return max(int(raw.strip()), 0)
    except ValueError:
        return 0


def parse_currently_reading(xml_text: str) -> Book | None:
    """
    Extract the first currently-reading book from a review list response.

    Args:
        xml_text: Body of /review/list/{user_id}.xml

    Returns:
        Book with progress 0 and current=True, or None when no review is on
        the currently-reading shelf

    Raises:
        GoodreadsError: If the body is not well-formed XML
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise GoodreadsError(f"Invalid Goodreads response: {e}") from e

    for review in root.iter("review"):
        if CURRENTLY_READING_SHELF not in _shelf_names(review):
            continue

        book = review.find("book")
        title = book.findtext("title") if book is not None else None
        pages = book.findtext("num_pages") if book is not None else None

        logger.debug("Found currently-reading review: %s", title)
        return Book(
            title=(title or "").strip() or UNKNOWN_TITLE,
            progress=0,
            pages=_parse_pages(pages),
            current=True,
        )

    return None
