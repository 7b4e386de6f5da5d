"""
Base DTOs - Application Layer

Wire models serialize with camelCase keys and accept either camelCase or
snake_case on input.
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base class for DTOs exchanged over HTTP."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchResultsDTO(CamelModel, Generic[T]):
    """One page of converted items plus the backend-reported total."""

    items: List[T] = Field(default_factory=list, description="Items on this page")
    total_count: int = Field(
        description="Total number of matching items across all pages"
    )
