from pydantic import BaseModel, ConfigDict, Field


class ShortenRequest(BaseModel):
    """Body of POST /api/v1/shorten.

    No URL validation happens here: whatever string the client sends is
    what gets shortened.
    """
    original_url: str = Field("", description="The original URL to be shortened")

    model_config = ConfigDict(extra="ignore")


class LinkResponse(BaseModel):
    """Response schema that serializes a LinkRecord.
    
    - from_attributes=True lets it read straight from the frozen dataclass
    - empty fields are dropped on output (see response_model_exclude_defaults)
    """
    id: str = ""
    original_url: str = ""
    short_url: str = ""

    model_config = ConfigDict(from_attributes=True)


class HealthResponse(BaseModel):
    status: str
    environment: str
    storage_backend: str
    links: int
