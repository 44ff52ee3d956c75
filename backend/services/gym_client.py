"""HTTP client for the upstream gym listing API."""

from __future__ import annotations

import logging

import httpx

from backend import config

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The listing API could not be reached or answered with something unusable."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class GymClient:
    """HTTP client for the gym listing API.

    Issues a single GET per call. No retries; the configured timeout is the
    only bound on how long a page request waits for the upstream.
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url or config.settings.GYMS_API_URL
        self._timeout = timeout if timeout is not None else config.settings.GYMS_API_TIMEOUT
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def fetch_gyms(self) -> list[str]:
        """
        Fetch the gym listing from the upstream API.

        Returns:
            Listing names in the order the upstream sent them

        Raises:
            UpstreamError: On a network error, a non-2xx status, or a body
                that is not a JSON array of strings
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(self._url)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Listing API unreachable: {e}", url=self._url) from e

        if not response.is_success:
            raise UpstreamError(
                f"Listing API returned {response.status_code}",
                url=self._url,
                status_code=response.status_code,
            )

        try:
            gyms = response.json()
        except ValueError as e:
            raise UpstreamError(
                "Listing API returned invalid JSON",
                url=self._url,
                status_code=response.status_code,
            ) from e

        if not isinstance(gyms, list) or not all(isinstance(g, str) for g in gyms):
            raise UpstreamError(
                "Listing API did not return an array of strings",
                url=self._url,
                status_code=response.status_code,
            )

        logger.debug("Fetched %d gyms from %s", len(gyms), self._url)
        return gyms
