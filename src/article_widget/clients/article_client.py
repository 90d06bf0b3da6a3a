"""Article API client for fetching raw article documents."""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from schemas.article import RawArticleData

from .client import Client
from .exceptions import ValidationError

logger = logging.getLogger(__name__)


class ArticleClient(Client):
    """Client for the CMS article endpoint.

    Fetches one article document per call and validates it against the
    RawArticleData schema. Session cookies and headers from the config are
    sent with every request, so the API sees the viewer's credentials.

    Example:
        config = {"base_url": "https://app.example.com/api"}
        async with ArticleClient(config) as client:
            raw = await client.fetch("66ce0559b660075a0efc7800")
    """

    API_PATH = "/articles/{article_id}"

    async def fetch(
        self, article_id: str, validate: bool = True
    ) -> RawArticleData | dict[str, Any] | None:
        """Fetch a single article.

        Args:
            article_id: Identifier of the article
            validate: If True, validate the response against RawArticleData

        Returns:
            RawArticleData if validate=True, otherwise the decoded JSON body.
            None if the API answered with a JSON null body.

        Raises:
            ValueError: If article_id is empty
            ValidationError: If the body is not JSON or fails schema validation
            NotFoundError: If the article does not exist
            APIError: If the API returns a non-2xx response
            ConnectionError: If the network connection fails
        """
        if not article_id:
            raise ValueError("article_id must not be empty")

        response = await self.get(self.API_PATH.format(article_id=article_id))
        data = self._json(response)
        logger.debug(f"Fetched article {article_id}")

        if data is None:
            logger.debug(f"Article {article_id} has an empty body")
            return None

        if validate:
            return self._validate_article(article_id, data)

        return data

    def _validate_article(self, article_id: str, data: Any) -> RawArticleData:
        """Validate a decoded article body.

        Raises:
            ValidationError: If the body does not match the schema
        """
        try:
            return RawArticleData.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Article {article_id} failed validation",
                errors=[str(err) for err in e.errors()],
            ) from e
