"""Jira agile REST board client."""

import base64
import json
import logging
import ssl
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Callable, Optional

from jiracl_core.boards.base import BoardService
from jiracl_core.errors import BoardServiceError
from jiracl_core.models.board import Board
from jiracl_core.models.config import BoardId, ConfigRecord


logger = logging.getLogger(__name__)

AGILE_API_PATH = "rest/agile/1.0"
PAGE_SIZE = 50


class JiraBoardClient(BoardService):
    """
    Board service backed by the Jira agile REST API.

    Uses HTTP basic auth with the configured username and API token.
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        proxy: Optional[str] = None,
        strict_ssl: bool = True,
        timeout: float = 30.0,
        request_fn: Optional[Callable[..., Any]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.timeout = timeout
        self._auth = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        self._request_fn = request_fn or self._build_opener(proxy, strict_ssl).open

    @classmethod
    def from_record(cls, record: ConfigRecord, timeout: float = 30.0) -> "JiraBoardClient":
        """Create a client from the loaded config record."""
        return cls(
            base_url=record.base_url,
            username=record.username,
            password=record.password,
            proxy=record.proxy,
            strict_ssl=record.strict_ssl,
            timeout=timeout,
        )

    @staticmethod
    def _build_opener(proxy: Optional[str], strict_ssl: bool) -> urllib.request.OpenerDirector:
        context = ssl.create_default_context()
        if not strict_ssl:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE

        handlers: list[urllib.request.BaseHandler] = [urllib.request.HTTPSHandler(context=context)]
        if proxy:
            handlers.append(urllib.request.ProxyHandler({"http": proxy, "https": proxy}))
        return urllib.request.build_opener(*handlers)

    def list_boards(self) -> list[Board]:
        """List all boards, following the API pagination."""
        boards: list[Board] = []
        start_at = 0

        while True:
            page = self._get_json("board", {"startAt": start_at, "maxResults": PAGE_SIZE})
            values = page.get("values", [])
            boards.extend(Board.from_dict(item) for item in values)

            if page.get("isLast", True) or not values:
                break
            start_at += len(values)

        logger.debug("Fetched %d boards from %s", len(boards), self.base_url)
        return boards

    def get_board(self, board_id: BoardId) -> Board:
        """Get a single board by id."""
        return Board.from_dict(self._get_json(f"board/{board_id}"))

    def build_request(self, path: str, params: Optional[dict[str, Any]] = None) -> urllib.request.Request:
        """Build an authenticated GET request against the agile API."""
        url = f"{self.base_url}/{AGILE_API_PATH}/{path}"
        if params:
            url = f"{url}?{urllib.parse.urlencode(params)}"

        request = urllib.request.Request(url, method="GET")
        request.add_header("authorization", f"Basic {self._auth}")
        request.add_header("accept", "application/json")
        return request

    def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        request = self.build_request(path, params)
        logger.debug("GET %s", request.full_url)

        try:
            response = self._request_fn(request, timeout=self.timeout)
            try:
                status = response.getcode()
                payload = response.read()
            finally:
                response.close()
        except urllib.error.HTTPError as exc:
            body = exc.read().decode("utf-8", "replace")
            raise BoardServiceError(f"Jira request failed ({exc.code}): {body}") from exc
        except urllib.error.URLError as exc:
            raise BoardServiceError(f"Jira request failed: {exc.reason}") from exc

        if status != 200:
            body = payload.decode("utf-8", "replace")
            raise BoardServiceError(f"Jira request failed ({status}): {body}")

        try:
            return json.loads(payload.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise BoardServiceError(f"Jira returned an invalid response: {exc}") from exc
