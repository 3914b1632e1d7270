"""AUR RPC client.

Translates package names or a search term into RemotePackage records.
Requests are synchronous and single shot: any transport, HTTP status or
decode failure raises RegistryError and nothing is retried.
"""

import logging
from collections.abc import Iterable
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from aurctl import __version__
from aurctl.core.errors import RegistryError
from aurctl.models.package import RegistryResponse, RemotePackage
from aurctl.utils.formatting import print_action

logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = "https://aur.archlinux.org/rpc/v5"


class RegistryClient:
    """Client for the AUR RPC v5 interface.

    Example:
        >>> with RegistryClient() as client:
        ...     for pkg in client.fetch(["yay", "paru"]):
        ...         print(pkg.name, pkg.version)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_RPC_URL,
        *,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: RPC endpoint, without trailing slash.
            timeout: Request timeout in seconds.
            client: Preconfigured httpx client (mainly for tests).
        """
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": f"aurctl/{__version__}"},
        )

    def __enter__(self) -> "RegistryClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()

    def fetch(self, names: Iterable[str]) -> list[RemotePackage]:
        """Fetch records for the given package names in a single request.

        Names unknown to the AUR are silently left out of the result.

        Args:
            names: Package names to look up.

        Returns:
            One record per known name, in API order.

        Raises:
            RegistryError: On any transport or decode failure.
        """
        print_action("Fetching packages...")
        params = [("arg[]", name) for name in sorted(set(names))]
        return self._get(f"{self._base_url}/info", params)

    def search(self, term: str) -> list[RemotePackage]:
        """Search package names and descriptions.

        Args:
            term: Free-text search term.

        Returns:
            Matching records, unsorted.

        Raises:
            RegistryError: On any transport or decode failure.
        """
        return self._get(f"{self._base_url}/search/{quote(term, safe='')}", None)

    def _get(self, url: str, params: list[tuple[str, str]] | None) -> list[RemotePackage]:
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
            payload: Any = response.json()
        except httpx.HTTPStatusError as e:
            msg = f"AUR request failed with HTTP {e.response.status_code}: {url}"
            raise RegistryError(msg) from e
        except httpx.HTTPError as e:
            raise RegistryError(f"AUR request failed: {e}") from e
        except ValueError as e:
            raise RegistryError(f"Invalid JSON from AUR: {e}") from e

        try:
            envelope = RegistryResponse.model_validate(payload)
        except ValidationError as e:
            raise RegistryError(f"Unexpected AUR response: {e}") from e

        if envelope.type == "error":
            raise RegistryError(f"AUR error: {envelope.error or 'unknown error'}")

        logger.debug("AUR returned %d result(s)", envelope.resultcount)
        return envelope.results
