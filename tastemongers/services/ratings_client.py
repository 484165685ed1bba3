"""
Ratings fetch layer and catalog page state.

RatingsClient performs the single GET /api/ratings/ request a catalog page
makes. RatingsCatalog holds everything the page keeps in memory after
that: the fetched list, the filter state, the sort selection and the
detail navigator. Re-filtering never triggers another fetch.

Load states:
    LOADING -> READY   ratings fetched and parsed
    LOADING -> ERROR   network failure, non-200 status or malformed payload

Usage:
    from tastemongers.services.ratings_client import RatingsCatalog, RatingsClient

    catalog = RatingsCatalog(RatingsClient())
    catalog.load()
    catalog.set_filters(min_overall_rating=8)
    catalog.set_sort("name_asc")
    catalog.open(catalog.filtered[0])
    catalog.navigate("next")
"""

import logging
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List, Optional

import httpx

from tastemongers.services import client_settings
from tastemongers.services.catalog_query import (
    FilterState,
    SortOption,
    apply_query,
    facet_values,
)
from tastemongers.services.detail_navigator import DetailNavigator
from tastemongers.services.rating_types import RatingRecord

logger = logging.getLogger(__name__)

RATINGS_PATH = "/api/ratings/"


class RatingsFetchError(Exception):
    """The rating list could not be retrieved or parsed."""

    pass


class RatingsClient:
    """
    HTTP client for the ratings read endpoint.

    Args:
        base_url: API origin; defaults to settings.TASTEMONGERS_API_BASE_URL
        timeout: Request timeout in seconds
        http_client: Pre-built httpx.Client (its base_url is used as-is)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.http_client = http_client
        if http_client is None and (base_url is None or timeout is None):
            default_url, default_timeout = client_settings()
            base_url = base_url or default_url
            timeout = timeout if timeout is not None else default_timeout
        self.base_url = base_url
        self.timeout = timeout

    def _get(self, path: str) -> httpx.Response:
        if self.http_client is not None:
            return self.http_client.get(path)
        with httpx.Client(base_url=self.base_url, timeout=self.timeout) as client:
            return client.get(path)

    def fetch_ratings(self) -> List[RatingRecord]:
        """
        Fetch the full rating list in store order.

        Raises:
            RatingsFetchError: On network errors, non-200 responses or bad payloads
        """
        try:
            response = self._get(RATINGS_PATH)
        except httpx.HTTPError as e:
            raise RatingsFetchError(f"Request failed: {e}") from e

        if response.status_code != 200:
            raise RatingsFetchError(f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise RatingsFetchError("Response is not valid JSON") from e

        if not isinstance(payload, list):
            raise RatingsFetchError("Expected a JSON array of ratings")

        try:
            return [RatingRecord.from_dict(item) for item in payload]
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            raise RatingsFetchError(f"Malformed rating in response: {e}") from e


class LoadState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class RatingsCatalog:
    """
    In-memory state of one catalog page.

    The filtered list is recomputed from the fetched ratings on every
    access, so it always reflects the current filters and sort.
    """

    def __init__(self, client: RatingsClient):
        self.client = client
        self.state = LoadState.LOADING
        self.error: Optional[str] = None
        self.ratings: List[RatingRecord] = []
        self.filters = FilterState()
        self.sort: Optional[SortOption] = None
        self.navigator = DetailNavigator()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> LoadState:
        self.state = LoadState.LOADING
        self.error = None
        try:
            self.ratings = self.client.fetch_ratings()
        except RatingsFetchError as e:
            logger.warning("Error fetching ratings: %s", e)
            self.ratings = []
            self.error = "Ratings could not be loaded. Please try again."
            self.state = LoadState.ERROR
            return self.state

        self.state = LoadState.READY
        return self.state

    # ------------------------------------------------------------------
    # Query state
    # ------------------------------------------------------------------

    @property
    def filtered(self) -> List[RatingRecord]:
        return apply_query(self.ratings, self.filters, self.sort)

    @property
    def facets(self) -> Dict[str, List[str]]:
        return facet_values(self.ratings)

    def set_filters(self, **changes: Any) -> List[RatingRecord]:
        """
        Change some filter fields; raw values go through the input layer.

        Closes the detail view if its rating no longer matches.
        """
        if "type" in changes:
            changes["category"] = changes.pop("type")
        merged = {**asdict(self.filters), **changes}
        self.filters = FilterState.from_query_params(merged)
        filtered = self.filtered
        self.navigator.sync(filtered)
        return filtered

    def set_sort(self, value: Any) -> List[RatingRecord]:
        self.sort = SortOption.parse(value)
        return self.filtered

    def reset_filters(self) -> List[RatingRecord]:
        """Clear every filter and the sort selection."""
        self.filters = FilterState()
        self.sort = None
        return self.filtered

    def summary(self) -> str:
        return f"Showing {len(self.filtered)} of {len(self.ratings)} items"

    # ------------------------------------------------------------------
    # Detail view
    # ------------------------------------------------------------------

    @property
    def selected(self) -> Optional[RatingRecord]:
        return self.navigator.selected

    def open(self, rating: RatingRecord) -> None:
        self.navigator.open(rating)

    def close(self) -> None:
        self.navigator.close()

    def navigate(self, direction) -> Optional[RatingRecord]:
        return self.navigator.navigate(direction, self.filtered)
