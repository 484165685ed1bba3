"""
Catalog query engine: filtering, sorting and faceting of ratings.

Works on any sequence of objects exposing the Rating attributes
(name, category, origin, overall_rating, flavor_intensity, complexity,
creaminess), i.e. Rating model instances or RatingRecord values.

Pipeline:
    1. filter_ratings  - every active predicate of a FilterState, ANDed
    2. sort_ratings    - optional SortOption, stable
    apply_query runs both and never touches its input.

The engine assumes valid inputs. Clamping and parsing of raw user input
happens in FilterState.from_query_params and SortOption.parse.

Example:
    >>> filters = FilterState(min_overall_rating=8)
    >>> apply_query(ratings, filters, SortOption.NAME_ASC)
"""

import unicodedata
from dataclasses import dataclass, replace
from decimal import ROUND_CEILING, Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, TypeVar

from tastemongers.constants import SCORE_MIN, SCORE_MAX

T = TypeVar("T")

# FilterState threshold field -> rating attribute
THRESHOLD_FIELDS = {
    "min_overall_rating": "overall_rating",
    "min_flavor_intensity": "flavor_intensity",
    "min_complexity": "complexity",
    "min_creaminess": "creaminess",
}


@dataclass(frozen=True)
class FilterState:
    """
    User-chosen constraints narrowing the rating list.

    Empty strings and zero thresholds are inactive.
    """

    category: str = ""
    origin: str = ""
    min_overall_rating: int = 0
    min_flavor_intensity: int = 0
    min_complexity: int = 0
    min_creaminess: int = 0
    search: str = ""

    @property
    def is_default(self) -> bool:
        return self == FilterState()

    def update(self, **changes) -> "FilterState":
        """Copy with some fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_query_params(cls, params: Mapping[str, Any]) -> "FilterState":
        """
        Build a FilterState from raw request/query parameters.

        Thresholds are clamped into the score scale; anything that is not
        a number counts as "no constraint". Category and origin are
        stripped, search text is matched as typed. ``type`` is accepted as an
        alias for ``category`` since that is the wire name of the field.
        """
        category = params.get("category") or params.get("type") or ""
        thresholds = {
            name: _clamp_score(params.get(name)) for name in THRESHOLD_FIELDS
        }
        return cls(
            category=str(category).strip(),
            origin=str(params.get("origin") or "").strip(),
            search=str(params.get("search") or ""),
            **thresholds,
        )


def _clamp_score(raw: Any) -> int:
    # Scores are whole numbers, so a fractional threshold rounds up: 7.5 keeps 8 and above
    try:
        value = Decimal(str(raw).strip())
    except (TypeError, ValueError, InvalidOperation):
        return SCORE_MIN
    if not value.is_finite():
        return SCORE_MIN
    value = int(value.to_integral_value(rounding=ROUND_CEILING))
    return max(SCORE_MIN, min(value, SCORE_MAX))


class SortOption(str, Enum):
    """Sort selections offered by the catalog."""

    OVERALL_RATING_DESC = "overall_rating_desc"
    OVERALL_RATING_ASC = "overall_rating_asc"
    INTENSITY_DESC = "intensity_desc"
    INTENSITY_ASC = "intensity_asc"
    COMPLEXITY_DESC = "complexity_desc"
    COMPLEXITY_ASC = "complexity_asc"
    CREAMINESS_DESC = "creaminess_desc"
    CREAMINESS_ASC = "creaminess_asc"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    TYPE_ASC = "type_asc"
    TYPE_DESC = "type_desc"
    ORIGIN_ASC = "origin_asc"
    ORIGIN_DESC = "origin_desc"

    @property
    def field(self) -> str:
        return SORT_FIELDS[self][0]

    @property
    def is_text(self) -> bool:
        return SORT_FIELDS[self][1]

    @property
    def descending(self) -> bool:
        return self.value.endswith("_desc")

    @classmethod
    def parse(cls, value: Any) -> Optional["SortOption"]:
        """Return the matching option, or None for empty/unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip())
        except ValueError:
            return None


# option -> (rating attribute, compared as text)
SORT_FIELDS: Dict[SortOption, Tuple[str, bool]] = {
    SortOption.OVERALL_RATING_DESC: ("overall_rating", False),
    SortOption.OVERALL_RATING_ASC: ("overall_rating", False),
    SortOption.INTENSITY_DESC: ("flavor_intensity", False),
    SortOption.INTENSITY_ASC: ("flavor_intensity", False),
    SortOption.COMPLEXITY_DESC: ("complexity", False),
    SortOption.COMPLEXITY_ASC: ("complexity", False),
    SortOption.CREAMINESS_DESC: ("creaminess", False),
    SortOption.CREAMINESS_ASC: ("creaminess", False),
    SortOption.NAME_ASC: ("name", True),
    SortOption.NAME_DESC: ("name", True),
    SortOption.TYPE_ASC: ("category", True),
    SortOption.TYPE_DESC: ("category", True),
    SortOption.ORIGIN_ASC: ("origin", True),
    SortOption.ORIGIN_DESC: ("origin", True),
}


def collation_key(text: str) -> Tuple[str, str, str]:
    """
    Sort key approximating locale-aware string comparison.

    Levels, compared in order:
        1. base letters: accents stripped, case folded ("Émmental" ~ "emmental")
        2. accents: case folded with accents kept (plain before accented)
        3. case: lowercase before uppercase
    """
    decomposed = unicodedata.normalize("NFKD", text or "")
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), decomposed.casefold(), decomposed.swapcase()


def matches(rating: Any, filters: FilterState) -> bool:
    """True if the rating passes every active predicate of the filter state."""
    if filters.category and rating.category != filters.category:
        return False
    if filters.origin and rating.origin != filters.origin:
        return False
    for threshold_name, attribute in THRESHOLD_FIELDS.items():
        if getattr(rating, attribute) < getattr(filters, threshold_name):
            return False
    if filters.search and filters.search.lower() not in rating.name.lower():
        return False
    return True


def filter_ratings(ratings: Sequence[T], filters: FilterState) -> List[T]:
    """Ratings satisfying the filter state, in input order."""
    return [rating for rating in ratings if matches(rating, filters)]


def sort_ratings(ratings: Sequence[T], sort: Optional[SortOption]) -> List[T]:
    """
    Order ratings by a sort selection.

    Without a selection the input order is kept. Equal elements keep their
    relative input order in both directions.
    """
    if sort is None:
        return list(ratings)

    attribute = sort.field
    if sort.is_text:
        key = lambda rating: collation_key(getattr(rating, attribute))
    else:
        key = lambda rating: getattr(rating, attribute)

    return sorted(ratings, key=key, reverse=sort.descending)


def apply_query(
    ratings: Sequence[T],
    filters: Optional[FilterState] = None,
    sort: Optional[SortOption] = None,
) -> List[T]:
    """Filter, then sort. Returns a new list."""
    filtered = filter_ratings(ratings, filters or FilterState())
    return sort_ratings(filtered, sort)


def facet_values(ratings: Sequence[Any]) -> Dict[str, List[str]]:
    """
    Distinct categories and origins, in order of first appearance.

    Returns:
        {"types": [...], "origins": [...]}
    """
    types: Dict[str, None] = {}
    origins: Dict[str, None] = {}
    for rating in ratings:
        types.setdefault(rating.category, None)
        origins.setdefault(rating.origin, None)
    return {"types": list(types), "origins": list(origins)}
