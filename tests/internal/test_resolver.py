"""Tests for request resolution."""

from dataclasses import dataclass

import httpx
import pytest

from netsession._internal.resolver import (
    DEFAULT_CONTENT_TYPE,
    ResolvedRequest,
    complete_url,
    method_name_and_body,
    parse_base_url,
    resolve_headers,
    resolve_request,
)
from netsession.exceptions import MalformedURLError
from netsession.models.request import Get, HeadersDict, HttpMethod, Post, Put, Request
from netsession.models.response import Response

BASE_URL = httpx.URL("https://api.example.com")


class Empty(Response):
    pass


@dataclass(frozen=True)
class SimpleRequest(Request[Empty]):
    response_type = Empty

    method: HttpMethod
    endpoint: str
    headers: HeadersDict | None = None


class TestParseBaseURL:
    """Tests for parse_base_url()."""

    def test_accepts_absolute_url(self):
        """Should parse an absolute URL."""
        url = parse_base_url("https://api.example.com/v1/")
        assert url.host == "api.example.com"

    def test_rejects_relative_url(self):
        """Should reject a relative base URL."""
        with pytest.raises(MalformedURLError) as exc_info:
            parse_base_url("/v1/")
        assert exc_info.value.url == "/v1/"

    def test_rejects_unparseable_url(self):
        """Should reject a URL httpx cannot parse."""
        with pytest.raises(MalformedURLError):
            parse_base_url("https://example.com:notaport/")


class TestCompleteURL:
    """Tests for complete_url()."""

    def test_get_query_items_in_order(self):
        """Should append GET query items, preserving order."""
        request = SimpleRequest(Get(query_items=[("a", "1"), ("b", "2")]), "/search")
        assert complete_url(request, BASE_URL) == "https://api.example.com/search?a=1&b=2"

    def test_get_query_items_replace_endpoint_query(self):
        """Should replace any query already on the endpoint."""
        request = SimpleRequest(Get(query_items=[("q", "new")]), "/search?q=old&x=1")
        assert complete_url(request, BASE_URL) == "https://api.example.com/search?q=new"

    def test_get_without_query_items_drops_query(self):
        """Should clear the endpoint query when GET carries no items."""
        request = SimpleRequest(Get(), "/search?q=old")
        assert complete_url(request, BASE_URL) == "https://api.example.com/search"

    def test_post_keeps_endpoint_query(self):
        """Should leave the endpoint query alone for POST."""
        request = SimpleRequest(Post(body=b"{}"), "/items?draft=1")
        assert complete_url(request, BASE_URL) == "https://api.example.com/items?draft=1"

    def test_query_values_are_escaped(self):
        """Should percent-encode query values."""
        request = SimpleRequest(Get(query_items=[("q", "a b&c")]), "/search")
        url = httpx.URL(complete_url(request, BASE_URL))
        assert url.params["q"] == "a b&c"

    def test_relative_to_base_path(self):
        """Should resolve relative endpoints against the base path."""
        request = SimpleRequest(Get(), "users")
        base = httpx.URL("https://api.example.com/v1/")
        assert complete_url(request, base) == "https://api.example.com/v1/users"

    def test_absolute_endpoint_wins(self):
        """Should use an absolute endpoint as-is."""
        request = SimpleRequest(Post(), "https://other.example.com/hook")
        assert complete_url(request, BASE_URL) == "https://other.example.com/hook"

    def test_malformed_endpoint_raises(self):
        """Should raise MalformedURLError for an unparseable endpoint."""
        request = SimpleRequest(Get(), "https://example.com:notaport/")
        with pytest.raises(MalformedURLError) as exc_info:
            complete_url(request, BASE_URL)
        assert exc_info.value.url == "https://example.com:notaport/"


class TestMethodNameAndBody:
    """Tests for method_name_and_body()."""

    def test_get(self):
        """GET should carry no body."""
        assert method_name_and_body(Get(query_items=[("a", "1")])) == ("GET", None)

    def test_post(self):
        """POST should carry its payload."""
        assert method_name_and_body(Post(body=b"data")) == ("POST", b"data")

    def test_put(self):
        """PUT should carry its payload."""
        assert method_name_and_body(Put(body=b"data")) == ("PUT", b"data")

    def test_post_without_body(self):
        """POST without a payload should have no body."""
        assert method_name_and_body(Post()) == ("POST", None)

    def test_unknown_method_raises(self):
        """Should reject anything that is not a method variant."""
        with pytest.raises(TypeError):
            method_name_and_body("DELETE")  # type: ignore[arg-type]


class TestResolveHeaders:
    """Tests for resolve_headers()."""

    def test_defaults_content_type(self):
        """Should add JSON Content-Type when absent."""
        headers = resolve_headers({"Accept": "application/json"})
        assert headers == {"Accept": "application/json", "Content-Type": DEFAULT_CONTENT_TYPE}

    def test_defaults_when_no_headers(self):
        """Should add JSON Content-Type when there are no headers at all."""
        assert resolve_headers(None) == {"Content-Type": "application/json"}

    def test_keeps_explicit_content_type(self):
        """Should not override an explicit Content-Type."""
        assert resolve_headers({"Content-Type": "text/plain"}) == {"Content-Type": "text/plain"}

    def test_explicit_content_type_any_case(self):
        """Should treat header names case-insensitively, like the transport."""
        headers = resolve_headers({"content-type": "text/plain"})
        assert headers == {"content-type": "text/plain"}

    def test_does_not_mutate_input(self):
        """Should copy the caller's map."""
        original = {"Accept": "text/html"}
        resolve_headers(original)
        assert original == {"Accept": "text/html"}

    def test_debug_logs_decision(self, capsys):
        """Should log the defaulting decision in debug mode."""
        resolve_headers(None, debug=True)
        assert "Defaulting request to Content-Type: application/json" in capsys.readouterr().err

    def test_silent_without_debug(self, capsys):
        """Should not log when debug is off."""
        resolve_headers({"Content-Type": "text/plain"})
        assert capsys.readouterr().err == ""


class TestResolveRequest:
    """Tests for resolve_request()."""

    def test_resolves_get(self):
        """Should produce URL, verb, no body and default headers."""
        request = SimpleRequest(Get(query_items=[("a", "1"), ("b", "2")]), "/search")
        resolved = resolve_request(request, BASE_URL)
        assert resolved == ResolvedRequest(
            url="https://api.example.com/search?a=1&b=2",
            method="GET",
            body=None,
            headers={"Content-Type": "application/json"},
        )

    def test_resolves_put_with_headers(self):
        """Should carry the PUT body and caller headers."""
        request = SimpleRequest(
            Put(body=b"raw"), "/items/1", headers={"Content-Type": "text/plain", "X-Id": "1"}
        )
        resolved = resolve_request(request, BASE_URL)
        assert resolved.method == "PUT"
        assert resolved.body == b"raw"
        assert resolved.headers == {"Content-Type": "text/plain", "X-Id": "1"}

    def test_resolves_multipart_post(self):
        """Should keep the multipart Content-Type from the encoder."""
        form_request = SimpleRequest(Post(), "/upload", headers={"X-Id": "1"})
        body, headers = form_request.multipart_form_data()
        resolved = resolve_request(SimpleRequest(Post(body=body), "/upload", headers), BASE_URL)
        assert resolved.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert resolved.headers["X-Id"] == "1"
        assert resolved.body == body
