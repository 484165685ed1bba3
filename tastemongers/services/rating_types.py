"""
Client-side record types for the ratings catalog.

These mirror the JSON returned by GET /api/ratings/. The attribute names
match the Rating model, so the catalog query engine works the same on
model instances (server side) and on these records (client side).
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class AffiliateOfferRecord:
    """One purchasable size of a rated cheese."""

    affiliate_url: str
    price: Decimal
    weight: Decimal
    unit: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AffiliateOfferRecord":
        return cls(
            affiliate_url=str(data["affiliate_url"]),
            price=Decimal(str(data["price"])),
            weight=Decimal(str(data["weight"])),
            unit=str(data.get("unit") or ""),
        )


@dataclass(frozen=True)
class RatingRecord:
    """A rating as delivered by the ratings endpoint."""

    id: int
    name: str
    category: str
    origin: str
    overall_rating: int
    flavor_intensity: int
    complexity: int
    creaminess: int
    tasting_notes: Optional[str] = None
    pairing_suggestions: Optional[str] = None
    image_url: Optional[str] = None
    affiliate_options: List[AffiliateOfferRecord] = field(default_factory=list)

    @property
    def has_offers(self) -> bool:
        return bool(self.affiliate_options)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RatingRecord":
        """
        Build a record from the wire format.

        Raises:
            KeyError: If a required key is missing
            ValueError/TypeError: If a score or price is not numeric
        """
        return cls(
            id=int(data["id"]),
            name=str(data["cheese_name"]),
            category=str(data["type"]),
            origin=str(data["origin"]),
            overall_rating=int(data["overall_rating"]),
            flavor_intensity=int(data["flavor_intensity"]),
            complexity=int(data["complexity"]),
            creaminess=int(data["creaminess"]),
            tasting_notes=data.get("tasting_notes"),
            pairing_suggestions=data.get("pairing_suggestions"),
            image_url=data.get("image_url"),
            affiliate_options=[
                AffiliateOfferRecord.from_dict(option)
                for option in (data.get("affiliate_options") or [])
            ],
        )
