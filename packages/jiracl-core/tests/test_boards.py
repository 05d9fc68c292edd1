"""Tests for the Jira board client."""

import base64
import io
import json
import ssl
import urllib.error
import urllib.request

import pytest

from jiracl_core import Board, BoardServiceError, ConfigRecord, JiraBoardClient, Protocol, find_board


class FakeResponse:
    def __init__(self, payload, status=200):
        self._body = json.dumps(payload).encode("utf-8") if not isinstance(payload, bytes) else payload
        self._status = status
        self.closed = False

    def getcode(self):
        return self._status

    def read(self):
        return self._body

    def close(self):
        self.closed = True


def _client(responses, requests):
    def request_fn(request, timeout):
        requests.append((request, timeout))
        response = responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    return JiraBoardClient(
        base_url="https://a.atlassian.net/",
        username="u",
        password="p",
        timeout=5.0,
        request_fn=request_fn,
    )


def test_list_boards_follows_pages():
    """Test pagination continues until isLast."""
    requests = []
    client = _client([
        FakeResponse({"startAt": 0, "isLast": False, "values": [{"id": 1, "name": "Sprint", "type": "scrum"}]}),
        FakeResponse({"startAt": 1, "isLast": True, "values": [{"id": 2, "name": "Backlog", "type": "kanban"}]}),
    ], requests)

    boards = client.list_boards()

    assert boards == [Board(1, "Sprint", "scrum"), Board(2, "Backlog", "kanban")]
    assert len(requests) == 2
    assert requests[0][0].full_url == "https://a.atlassian.net/rest/agile/1.0/board?startAt=0&maxResults=50"
    assert "startAt=1" in requests[1][0].full_url
    assert requests[0][1] == 5.0


def test_requests_use_basic_auth():
    requests = []
    client = _client([FakeResponse({"id": 2, "name": "Backlog"})], requests)

    client.get_board(2)

    request = requests[0][0]
    expected = base64.b64encode(b"u:p").decode("ascii")
    assert request.get_header("Authorization") == f"Basic {expected}"
    assert request.full_url == "https://a.atlassian.net/rest/agile/1.0/board/2"


def test_get_board():
    client = _client([FakeResponse({"id": 2, "name": "Backlog"})], [])
    assert client.get_board(2) == Board(2, "Backlog")


def test_http_error_raises_board_service_error():
    """Test HTTP errors carry the status code."""
    error = urllib.error.HTTPError(
        "https://a.atlassian.net/rest/agile/1.0/board/9", 404, "Not Found", {}, io.BytesIO(b"no board")
    )
    client = _client([error], [])

    with pytest.raises(BoardServiceError, match="404"):
        client.get_board(9)


def test_network_error_raises_board_service_error():
    client = _client([urllib.error.URLError("connection refused")], [])
    with pytest.raises(BoardServiceError, match="connection refused"):
        client.list_boards()


def test_invalid_json_raises_board_service_error():
    client = _client([FakeResponse(b"<html>")], [])
    with pytest.raises(BoardServiceError, match="invalid response"):
        client.get_board(1)


def test_from_record():
    record = ConfigRecord(
        protocol=Protocol.HTTP,
        host="jira.local",
        username="u",
        password="p",
        proxy="http://proxy:3128",
    )
    client = JiraBoardClient.from_record(record, timeout=12.0)
    assert client.base_url == "http://jira.local"
    assert client.timeout == 12.0


def test_find_board():
    boards = [Board(1, "Sprint"), Board(2, "Backlog")]
    assert find_board(boards, "Backlog").id == 2
    assert find_board(boards, "Missing") is None


def _handler(opener, handler_type):
    return next(h for h in opener.handlers if isinstance(h, handler_type))


def test_opener_uses_proxy_and_skips_verification():
    """Test a proxy and strict_ssl=False configure the opener."""
    opener = JiraBoardClient._build_opener("http://proxy:3128", False)

    proxy_handler = _handler(opener, urllib.request.ProxyHandler)
    assert proxy_handler.proxies["http"] == "http://proxy:3128"
    assert proxy_handler.proxies["https"] == "http://proxy:3128"

    context = _handler(opener, urllib.request.HTTPSHandler)._context
    assert context.verify_mode == ssl.CERT_NONE
    assert context.check_hostname is False


def test_opener_verifies_certificates_by_default():
    """Test strict_ssl=True keeps certificate and hostname checks."""
    opener = JiraBoardClient._build_opener(None, True)

    context = _handler(opener, urllib.request.HTTPSHandler)._context
    assert context.verify_mode == ssl.CERT_REQUIRED
    assert context.check_hostname is True
