"""HTTP client for the upstream REST backend.

Forwards the caller's session headers so the backend identifies the user;
no session handling of its own. Failures are surfaced, never retried.
"""

import logging
from typing import Any

import httpx

from sinjapan_manager.domain.exceptions import BackendError

logger = logging.getLogger(__name__)

MSG_UNREACHABLE = "バックエンドに接続できません"


class BackendClient:
    """Thin JSON wrapper over ``httpx`` for ``/api/*`` calls.

    Uses the injected httpx client when given (the application-wide pool),
    otherwise opens a short-lived one per request.
    """

    def __init__(
        self,
        base_url: str,
        forward_headers: dict[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._forward_headers = dict(forward_headers or {})
        self._http_client = http_client
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_headers(self, *, json_body: bool) -> dict[str, str]:
        headers = {"Accept": "application/json", **self._forward_headers}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        files: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Returns ``None`` for 204 or an empty body.

        Raises:
            BackendError: On a non-2xx status or a transport failure.
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json if files is None else None,
                    files=files,
                    headers=self._get_headers(json_body=json is not None and files is None),
                    timeout=self._timeout,
                )
            except httpx.HTTPError as exc:
                logger.warning("%s %s failed: %s", method, path, exc)
                raise BackendError(502, MSG_UNREACHABLE) from exc

            logger.debug("%s %s -> %d", method, path, response.status_code)
            if not response.is_success:
                self._raise_backend_error(method, path, response)

            if response.status_code == 204 or not response.content:
                return None
            try:
                return response.json()
            except ValueError:
                return response.text

        finally:
            if should_close:
                await client.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    def _raise_backend_error(self, method: str, path: str, response: httpx.Response) -> None:
        """Raise BackendError carrying the server-provided message."""
        message = _error_message(response)
        level = logging.INFO if response.status_code in (401, 404) else logging.WARNING
        logger.log(level, "%s %s -> %d: %s", method, path, response.status_code, message)
        raise BackendError(response.status_code, message)


def _error_message(response: httpx.Response) -> str:
    """``message``, else ``error``, else the raw text, else the HTTP reason."""
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        for key in ("message", "error"):
            value = data.get(key)
            if isinstance(value, dict):
                value = value.get("message")
            if isinstance(value, str) and value:
                return value

    text = response.text.strip()
    if text:
        return text
    return response.reason_phrase or f"HTTP {response.status_code}"
