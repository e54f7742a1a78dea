"""Remote artwork catalog client via requests; one GET per page."""
import logging
from typing import Optional

import requests

from artpager.config import ARTWORKS_API_URL, PAGE_SIZE, REQUEST_TIMEOUT_SEC
from artpager.models.artwork import ArtworkPage, artwork_from_dict

logger = logging.getLogger(__name__)


class CatalogFetchError(Exception):
    """A page could not be fetched (network error, timeout, non-2xx or undecodable body)."""

    def __init__(self, page: int, message: str) -> None:
        super().__init__(f"page {page}: {message}")
        self.page = page


class ArtworksClient:
    """Fetches fixed-size pages from a paginated list endpoint.

    The endpoint answers ``GET {base_url}?page={n}&limit={size}`` with
    ``{"data": [...], "pagination": {"total": N}}``.
    """

    def __init__(
        self,
        base_url: str = ARTWORKS_API_URL,
        timeout: float = REQUEST_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch_page(self, page: int, limit: int = PAGE_SIZE) -> ArtworkPage:
        """Return one page of artworks. Raises CatalogFetchError on any failure; no retry."""
        params = {"page": page, "limit": limit}
        logger.debug("GET %s %s", self.base_url, params)
        try:
            resp = self._session.get(self.base_url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as e:
            raise CatalogFetchError(page, str(e)) from e
        except ValueError as e:
            raise CatalogFetchError(page, f"invalid JSON body: {e}") from e

        if not isinstance(body, dict):
            raise CatalogFetchError(page, f"expected a JSON object, got {type(body).__name__}")
        data = body.get("data") or []
        if not isinstance(data, list):
            raise CatalogFetchError(page, f"expected 'data' to be a list, got {type(data).__name__}")
        records = []
        for item in data:
            try:
                records.append(artwork_from_dict(item))
            except (KeyError, TypeError):
                logger.debug("Skipping row without id on page %d: %r", page, item)
                continue
        try:
            total = int((body.get("pagination") or {}).get("total") or 0)
        except (AttributeError, TypeError, ValueError) as e:
            raise CatalogFetchError(page, f"invalid pagination total: {e}") from e
        return ArtworkPage(page=page, records=records, total=total)

    def close(self) -> None:
        self._session.close()
