from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

REQUIRED_MOVIE_FIELDS = ("title", "director", "year")

class CamelModel(BaseModel):
    """Base schema exchanging camelCase keys with API clients"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class MovieInput(CamelModel):
    class Config:
        str_strip_whitespace = True

class MovieCreate(MovieInput):
    """Create movie; any ownerId sent by the client is ignored"""
    title: str = Field(..., min_length=1, description="Movie title")
    director: str = Field(..., min_length=1, description="Director name")
    year: int = Field(..., strict=True, ge=1, le=9999, description="Release year")
    poster_url: Optional[str] = Field(None, description="Poster image URL")

class MovieUpdate(MovieInput):
    """Update movie; only the fields present in the body are written"""
    title: Optional[str] = Field(None, min_length=1)
    director: Optional[str] = Field(None, min_length=1)
    year: Optional[int] = Field(None, strict=True, ge=1, le=9999)
    poster_url: Optional[str] = None

    @model_validator(mode="after")
    def check_fields(self):
        if not self.model_fields_set:
            raise ValueError("Debe indicar al menos un campo a actualizar")
        for field in REQUIRED_MOVIE_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"El campo '{field}' no puede ser nulo")
        return self

class MovieRating(CamelModel):
    rating: int = Field(..., strict=True, ge=1, le=10, description="Rating from 1 to 10")

class MovieResponse(CamelModel):
    """Movie response"""
    id: str
    title: str
    director: str
    year: int
    poster_url: Optional[str] = None
    rating: Optional[int] = None
    owner_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class PublicStatsResponse(CamelModel):
    message: str
    total_movies: int
