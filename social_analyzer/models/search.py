"""Request model for the search form submission."""

from pydantic import BaseModel, Field, field_validator

from social_analyzer.models.enums import Platform, Timeframe


class SearchRequest(BaseModel):
    """Payload forwarded to the backend ``/scrape`` endpoint."""
    keyword: str = Field(..., min_length=1)
    platform: Platform = Platform.TWITTER
    timeframe: Timeframe = Timeframe.last_7d

    @field_validator("keyword")
    @classmethod
    def _strip_keyword(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("keyword must not be blank")
        return stripped
