"""HTTP gateway for the DistroVitals backend API."""

import logging
import urllib.parse

import httpx
from pydantic import TypeAdapter, ValidationError

from distrovitals.models.schemas import ApiEnvelope, HealthSnapshot, HistoryPoint, RankingEntry

logger = logging.getLogger(__name__)

_RANKINGS = TypeAdapter(list[RankingEntry])
_HEALTH = TypeAdapter(HealthSnapshot)
_HISTORY = TypeAdapter(list[HistoryPoint])


class ApiError(Exception):
    """Raised when a request fails or the envelope reports `success=false`."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DistroVitalsClient:
    """Fetches rankings, health snapshots and history from the backend.

    Every endpoint wraps its payload in `{success, data, error}`; this client
    unwraps it and validates `data` into the models in
    `distrovitals.models.schemas`.
    """

    API_PREFIX = "/api/v1"
    HISTORY_DAYS = 30

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Root URL of the backend, without the `/api/v1` prefix.
            client: Optional httpx client. If not provided, one is created per request.
            timeout: Request timeout in seconds for clients created here.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create an HTTP client."""
        if self._client is not None:
            return self._client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _fetch(self, endpoint: str, params: dict | None = None) -> object:
        """GET an endpoint and return the unwrapped `data` payload.

        Raises:
            ApiError: On transport errors, non-JSON bodies, or `success=false`.
        """
        client = await self._get_client()
        url = f"{self.base_url}{self.API_PREFIX}{endpoint}"

        try:
            response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning("API Error: %s %s", url, e)
            raise ApiError(str(e) or type(e).__name__) from e
        finally:
            if self._client is None:
                await client.aclose()

        # Error responses still carry an envelope, so parse before checking status.
        try:
            envelope = ApiEnvelope.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("API Error: %s returned an unreadable body (%s)", url, response.status_code)
            raise ApiError(f"HTTP {response.status_code}", response.status_code) from e

        if not envelope.success:
            message = envelope.error or "API error"
            logger.warning("API Error: %s %s", url, message)
            raise ApiError(message, response.status_code)

        return envelope.data

    def _validate(self, adapter: TypeAdapter, data: object, what: str):
        try:
            return adapter.validate_python(data)
        except ValidationError as e:
            raise ApiError(f"Malformed {what} payload: {e.error_count()} validation error(s)") from e

    async def get_rankings(self) -> list[RankingEntry]:
        """Fetch the ranking collection, best score first."""
        data = await self._fetch("/rankings")
        return self._validate(_RANKINGS, data or [], "rankings")

    async def get_health(self, slug: str) -> HealthSnapshot:
        """Fetch the latest health snapshot for a distribution."""
        data = await self._fetch(f"/distros/{urllib.parse.quote(slug, safe='')}/health")
        return self._validate(_HEALTH, data, "health")

    async def get_history(self, slug: str, days: int = HISTORY_DAYS) -> list[HistoryPoint]:
        """Fetch the score history for the trailing `days` window, oldest first."""
        data = await self._fetch(
            f"/distros/{urllib.parse.quote(slug, safe='')}/history",
            params={"days": days},
        )
        return self._validate(_HISTORY, data or [], "history")
