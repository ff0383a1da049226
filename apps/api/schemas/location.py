"""Pydantic schemas for the location endpoints"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from apps.locations.schemas.reference import UKLocationCategory


class CategoryResponse(BaseModel):
    """One location category as shown to clients"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    icon: str
    description: str
    search_queries: List[str] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list)

    @classmethod
    def from_category(cls, category: UKLocationCategory) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            icon=category.icon,
            description=category.description,
            search_queries=list(category.search_queries),
            types=list(category.types),
        )


class CategoryListResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    categories: List[CategoryResponse]
    total_count: int
