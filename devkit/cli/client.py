"""
HTTP Client for CLI.

Async client for the DevKit REST API. Every request carries the profile's
API key as a bearer token. Responses are decoded into caller-supplied types
through pydantic, and failures are normalized into three errors:

    TransportError - the request could not be sent or got no response
    RequestError   - the service answered with a non-2xx status
    DecodeError    - a 2xx body did not match the expected type
"""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from devkit import __version__
from devkit.core.exceptions import DecodeError, RequestError, TransportError
from devkit.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

T = TypeVar("T")


class APIClient:
    """
    HTTP client bound to one profile's base URL and API key.

    Holds no state besides the lazily created httpx client, so building one
    per invocation is cheap. No retries are attempted.

    Usage:
        async with APIClient("https://api.example.com", "key") as client:
            apps = await client.get("/api/v1/applications", list[ApplicationResponse])
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            base_url: Service base URL; trailing slashes are stripped.
            api_key: API key sent as a bearer token.
            timeout: Request timeout in seconds. If None, the httpx default applies.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._api_key = api_key
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            options: dict[str, Any] = {}
            if self.timeout is not None:
                options["timeout"] = self.timeout
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "User-Agent": f"devkit-cli/{__version__}",
                    "Accept": "application/json",
                },
                transport=self._transport,
                **options,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Send one request and return the response if its status is 2xx.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Path relative to the base URL (e.g., /api/v1/applications)
            json: JSON body; pydantic models are dumped by alias
            params: Query parameters; None values are dropped

        Raises:
            TransportError: If no response was received
            RequestError: If the response status is not 2xx
        """
        if isinstance(json, BaseModel):
            json = json.model_dump(mode="json", by_alias=True)
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        log_with_source(logger, "cli", "debug", "API request", method=method, path=path)

        try:
            client = await self._get_client()
            response = await client.request(method, path, json=json, params=params or None)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log_with_source(
                logger, "cli", "debug", "API request failed",
                method=method, path=path, error=str(e),
            )
            raise TransportError(
                f"{method} {self.base_url}{path} could not be completed: {type(e).__name__}: {e}"
            ) from e

        log_with_source(
            logger, "cli", "debug", "API response",
            method=method, path=path, status_code=response.status_code,
        )

        if not response.is_success:
            raise RequestError(
                response.status_code,
                _read_body(response),
                method=method,
                path=path,
            )
        return response

    async def get(self, path: str, response_type: type[T], params: dict[str, Any] | None = None) -> T:
        """Make a GET request and decode the body."""
        response = await self.request("GET", path, params=params)
        return _decode(response, response_type, "GET", path)

    async def post(
        self,
        path: str,
        body: Any,
        response_type: type[T],
        params: dict[str, Any] | None = None,
    ) -> T:
        """Make a POST request with a JSON body and decode the response."""
        response = await self.request("POST", path, json=body, params=params)
        return _decode(response, response_type, "POST", path)

    async def put(self, path: str, body: Any, response_type: type[T]) -> T:
        """Make a PUT request with a JSON body and decode the response."""
        response = await self.request("PUT", path, json=body)
        return _decode(response, response_type, "PUT", path)

    async def delete(self, path: str) -> None:
        """Make a DELETE request; the response body is ignored."""
        await self.request("DELETE", path)


def _read_body(response: httpx.Response) -> str:
    """Best-effort text of an error response; unreadable bodies become ''."""
    try:
        return response.text
    except (httpx.StreamError, LookupError, UnicodeDecodeError):
        return ""


def _decode(response: httpx.Response, response_type: type[T], method: str, path: str) -> T:
    """Validate a success body against response_type."""
    try:
        return TypeAdapter(response_type).validate_json(response.content)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<body>'}: {err['msg']}"
            for err in e.errors()
        )
        raise DecodeError(
            f"{method} {path} returned an unexpected body (status {response.status_code}): {problems}"
        ) from e
