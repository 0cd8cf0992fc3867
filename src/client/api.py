"""HTTP client for the DevConnector API."""

from typing import Any

import httpx
import structlog

logger = structlog.get_logger()


class ApiError(Exception):
    """Non-2xx response, or a request that never got one (status 0).

    ``data`` is the server's ``{field: message}`` error map.
    """

    def __init__(self, status_code: int, data: dict[str, Any]) -> None:
        self.status_code = status_code
        self.data = data
        super().__init__(f"{status_code}: {data}")


class ApiClient:
    """Thin async wrapper around ``httpx.AsyncClient``.

    The auth token is installed as a default header, so every request made
    after ``set_auth_token`` carries it until it is cleared.
    """

    TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    @property
    def auth_token(self) -> str | None:
        return self._client.headers.get("Authorization")

    def set_auth_token(self, token: str | None) -> None:
        """Apply the token (``Bearer <jwt>``) to every request, or remove it."""
        if token:
            self._client.headers["Authorization"] = token
        else:
            self._client.headers.pop("Authorization", None)

    async def get(self, path: str) -> Any:
        return await self._request("GET", path)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self._request("POST", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.TransportError as e:
            logger.warning("api_request_failed", method=method, path=path, error=str(e))
            raise ApiError(0, {"network": str(e) or type(e).__name__}) from e

        if response.is_success:
            return response.json()

        logger.info(
            "api_request_rejected",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        raise ApiError(response.status_code, _error_data(response))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


def _error_data(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {"error": response.text or response.reason_phrase}
    if isinstance(data, dict):
        return data
    return {"error": data}
