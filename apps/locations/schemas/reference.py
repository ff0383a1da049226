"""
Static reference entities: location categories, known airports/stations and
their terminals.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class UKLocationCategory:
    """A named group of seed queries used to bootstrap a category search."""
    id: str
    name: str
    icon: str
    search_queries: Tuple[str, ...]
    types: Tuple[str, ...]
    description: str

    def __post_init__(self):
        if not self.id:
            raise ValueError("Category id cannot be empty")
        if not self.search_queries:
            raise ValueError(f"Category {self.id} has no search queries")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "searchQueries": list(self.search_queries),
            "types": list(self.types),
            "description": self.description,
        }


@dataclass(frozen=True)
class KnownLocation:
    """An airport or railway station from the static dataset."""
    id: str
    name: str
    category: str  # "airport" | "train_station"
    city: str
    postcode: Optional[str]
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Terminal:
    """A terminal or platform group belonging to a KnownLocation."""
    id: str
    location_id: str
    name: str
    full_name: str
    latitude: float
    longitude: float
    type: str  # "terminal" | "platform"
    description: Optional[str] = None
