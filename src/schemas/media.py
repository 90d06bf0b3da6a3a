"""Media API response schemas."""

from pydantic import BaseModel, Field


class ResourceInfo(BaseModel):
    """Storage details of an uploaded media resource."""

    type: str | None = None
    bytes: int | None = None
    url: str
    format: str | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")

    model_config = {"extra": "allow", "populate_by_name": True}


class MediaUploadResponse(BaseModel):
    """Response returned by the media API after an upload.

    Attributes:
        id: Unique ID of the media resource
        name: Name of the media resource
        url: API URL of the media resource
        created_at: Creation timestamp (kept as string)
        resource_info: Storage details, including the public URL
    """

    id: str
    name: str | None = None
    url: str | None = None
    created_at: str | None = None
    resource_info: ResourceInfo = Field(alias="resourceInfo")

    model_config = {"extra": "allow", "populate_by_name": True}
