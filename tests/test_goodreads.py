"""
Tests for the Goodreads client and review-list parser.

Tests validate:
- currently-reading extraction from review list XML
- Defaults for missing title and page count
- OAuth-signed request to the review list URL
- Error mapping for network failures, bad URLs, bad status and bad XML
- Redirects are followed
"""

import httpx
import pytest

from homeboard.core.config.models import GoodreadsConfig
from homeboard.core.reading import (
    GoodreadsClient,
    GoodreadsCredentialsError,
    GoodreadsError,
    parse_currently_reading,
)

CREDENTIALS = GoodreadsConfig(key="ck", secret="cs", user_id="12345")


class TestParseCurrentlyReading:
    """Tests for parse_currently_reading."""

    def test_finds_currently_reading_review(self, review_list_xml):
        book = parse_currently_reading(review_list_xml)

        assert book is not None
        assert book.title == "The Left Hand of Darkness"
        assert book.pages == 304
        assert book.progress == 0
        assert book.current is True

    def test_empty_shelf_returns_none(self, empty_shelf_xml):
        assert parse_currently_reading(empty_shelf_xml) is None

    def test_no_reviews_returns_none(self):
        assert parse_currently_reading("<GoodreadsResponse><reviews/></GoodreadsResponse>") is None

    def test_first_match_wins(self):
        xml = """<GoodreadsResponse><reviews>
          <review><book><title>One</title><num_pages>1</num_pages></book>
            <shelves><shelf name="currently-reading"/></shelves></review>
          <review><book><title>Two</title><num_pages>2</num_pages></book>
            <shelves><shelf name="currently-reading"/></shelves></review>
        </reviews></GoodreadsResponse>"""
        assert parse_currently_reading(xml).title == "One"

    def test_review_on_several_shelves(self):
        xml = """<GoodreadsResponse><reviews>
          <review><book><title>Multi</title><num_pages>10</num_pages></book>
            <shelves><shelf name="to-read"/><shelf name="currently-reading"/></shelves></review>
        </reviews></GoodreadsResponse>"""
        assert parse_currently_reading(xml).title == "Multi"

    def test_missing_title_and_pages_defaulted(self):
        xml = """<GoodreadsResponse><reviews>
          <review><book><title></title><num_pages></num_pages></book>
            <shelves><shelf name="currently-reading"/></shelves></review>
        </reviews></GoodreadsResponse>"""
        book = parse_currently_reading(xml)

        assert book.title == "Unknown Book"
        assert book.pages == 0

    def test_non_numeric_pages(self):
        xml = """<GoodreadsResponse><reviews>
          <review><book><title>T</title><num_pages>lots</num_pages></book>
            <shelves><shelf name="currently-reading"/></shelves></review>
        </reviews></GoodreadsResponse>"""
        assert parse_currently_reading(xml).pages == 0

    def test_invalid_xml_raises(self):
        with pytest.raises(GoodreadsError, match="Invalid Goodreads response"):
            parse_currently_reading("<html>not xml")


class TestGoodreadsClient:
    """Tests for GoodreadsClient."""

    def test_requires_credentials(self):
        with pytest.raises(GoodreadsCredentialsError, match="not configured"):
            GoodreadsClient(GoodreadsConfig(key="ck", secret="cs"))

    def test_review_list_url(self):
        client = GoodreadsClient(CREDENTIALS)
        assert client.review_list_url == "https://www.goodreads.com/review/list/12345.xml"

    @pytest.mark.asyncio
    async def test_signed_request(self, make_transport, review_list_xml):
        transport = make_transport(200, text=review_list_xml)
        client = GoodreadsClient(CREDENTIALS, transport=transport)

        book = await client.get_currently_reading()

        assert book.title == "The Left Hand of Darkness"
        (request,) = transport.requests
        assert request.method == "GET"
        assert str(request.url) == "https://www.goodreads.com/review/list/12345.xml"
        auth = request.headers["Authorization"]
        assert auth.startswith("OAuth ")
        assert 'oauth_consumer_key="ck"' in auth
        assert 'oauth_signature_method="HMAC-SHA1"' in auth

    @pytest.mark.asyncio
    async def test_non_success_status(self, make_transport):
        client = GoodreadsClient(CREDENTIALS, transport=make_transport(401, text="nope"))

        with pytest.raises(GoodreadsError, match="Goodreads API error: 401"):
            await client.fetch_review_list()

    @pytest.mark.asyncio
    async def test_network_error(self, offline_transport):
        client = GoodreadsClient(CREDENTIALS, transport=offline_transport)

        with pytest.raises(GoodreadsError, match="request failed"):
            await client.fetch_review_list()

    @pytest.mark.asyncio
    async def test_base_url_without_scheme(self, make_transport):
        config = CREDENTIALS.model_copy(update={"base_url": "www.goodreads.com"})
        transport = make_transport(200, text="unused")
        client = GoodreadsClient(config, transport=transport)

        with pytest.raises(GoodreadsError, match="Invalid Goodreads URL"):
            await client.fetch_review_list()
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_follows_redirects(self, review_list_xml):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "www.goodreads.com":
                return httpx.Response(
                    302,
                    headers={"Location": "https://mirror.goodreads.com/review/list/12345.xml"},
                )
            return httpx.Response(200, text=review_list_xml)

        client = GoodreadsClient(CREDENTIALS, transport=httpx.MockTransport(handler))

        book = await client.get_currently_reading()

        assert book.title == "The Left Hand of Darkness"
