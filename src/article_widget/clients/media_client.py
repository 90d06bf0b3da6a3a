"""Media API client for uploading the built widget bundle."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from schemas.media import MediaUploadResponse

from .client import Client
from .exceptions import ValidationError

logger = logging.getLogger(__name__)


class MediaClient(Client):
    """Client for the CMS media endpoint.

    Uploads files as raw media resources, authenticated with a Basic token.

    Config keys (in addition to the base Client keys):
        auth_token (required): Token sent as "Authorization: Basic <token>"
    """

    API_PATH = "/media"

    def __init__(self, config: dict):
        if not config.get("auth_token"):
            raise ValueError("config must include 'auth_token'")
        super().__init__(config)

    @property
    def headers(self) -> dict[str, str]:
        headers = super().headers
        headers["Authorization"] = f"Basic {self._config['auth_token']}"
        return headers

    async def upload(
        self, file_path: Path, file_name: str | None = None
    ) -> MediaUploadResponse:
        """Upload a file as a raw media resource.

        Args:
            file_path: Path of the file to upload
            file_name: Name to store the file under (defaults to the file's name)

        Returns:
            The media resource created by the API

        Raises:
            FileNotFoundError: If file_path does not exist
            ValidationError: If the response does not match the schema
            APIError: If the API returns a non-2xx response
            ConnectionError: If the network connection fails
        """
        file_path = Path(file_path)
        if not file_path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        name = file_name or file_path.name
        metadata = {"type": "raw", "fileName": name}

        with file_path.open("rb") as f:
            response = await self.post(
                self.API_PATH,
                files={"file": (name, f)},
                data={"metadata": json.dumps(metadata)},
            )

        data = self._json(response)
        try:
            media = MediaUploadResponse.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                "Media upload response failed validation",
                errors=[str(err) for err in e.errors()],
            ) from e

        logger.info(f"Uploaded {name} as media {media.id}")
        return media
