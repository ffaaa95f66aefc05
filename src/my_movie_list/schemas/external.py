"""Pydantic schemas for Watchmode API responses."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WatchmodeSearchResult(BaseModel):
    """A single title result from Watchmode search."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="Watchmode title ID")
    name: str = Field(description="Title name")
    type: str | None = Field(default=None, description="Title type (movie, tv_series, ...)")
    year: int | None = Field(default=None, description="Release year")
    imdb_id: str | None = Field(default=None, description="IMDb ID")
    tmdb_id: int | None = Field(default=None, description="TMDB ID")
    tmdb_type: str | None = Field(default=None, description="TMDB media type")


class WatchmodeSearchResponse(BaseModel):
    """Response from Watchmode search endpoint."""

    model_config = ConfigDict(extra="ignore")

    title_results: list[WatchmodeSearchResult] = Field(
        default_factory=list, description="Matching titles"
    )


class WatchmodeTitleDetails(BaseModel):
    """Detailed title information from Watchmode."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="Watchmode title ID")
    title: str = Field(description="Title name")
    original_title: str | None = Field(default=None, description="Original title")
    plot_overview: str | None = Field(default=None, description="Plot overview")
    type: str | None = Field(default=None, description="Title type")
    runtime_minutes: int | None = Field(default=None, description="Runtime in minutes")
    year: int | None = Field(default=None, description="Release year")
    end_year: int | None = Field(default=None, description="Final year for series")
    release_date: date | None = Field(default=None, description="Release date")
    imdb_id: str | None = Field(default=None, description="IMDb ID")
    tmdb_id: int | None = Field(default=None, description="TMDB ID")
    genre_names: list[str] = Field(default_factory=list, description="Genre names")
    user_rating: float | None = Field(default=None, description="Average user rating")
    critic_score: int | None = Field(default=None, description="Critic score")
    us_rating: str | None = Field(default=None, description="US content rating")
    poster: str | None = Field(default=None, description="Poster image URL")
    backdrop: str | None = Field(default=None, description="Backdrop image URL")
    original_language: str | None = Field(default=None, description="Original language code")

    @field_validator("release_date", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | date | None) -> str | date | None:
        """Convert empty strings to None for date fields."""
        if v == "":
            return None
        return v
