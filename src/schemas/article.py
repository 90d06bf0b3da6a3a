"""Remote article payload schemas.

The article API returns one document per article, with the localized
fields keyed by language code:

    {
        "contents": {
            "en_US": {"title": ..., "teaser": ..., "content": ..., "image": {...}},
            "de_DE": {...}
        },
        "published": true,
        "channel": {"config": {"localization": {"en_US": {"title": ...}}}}
    }

Every field is optional; the API omits keys freely between languages.
Language entries are kept as received and validated one at a time when
looked up, so a malformed entry only affects the language it belongs to.
"""

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


def _validate_entry(model: type[BaseModel], entry: Any, name: str) -> Any:
    """Validate one keyed entry, treating a malformed entry as missing."""
    if entry is None:
        return None
    try:
        return model.model_validate(entry)
    except ValidationError as e:
        logger.warning(
            f"Ignoring malformed {name}: {e.error_count()} validation error(s)"
        )
        return None


class ImageVariant(BaseModel):
    """One rendition of an article image."""

    url: str | None = None

    model_config = {"extra": "allow"}


class ArticleImage(BaseModel):
    """Image attached to a localized article entry."""

    original: ImageVariant | None = None

    model_config = {"extra": "allow"}


class LocalizedContent(BaseModel):
    """Fields of an article in a single language.

    Attributes:
        title: Article headline
        teaser: Short summary shown in listings
        content: Article body as HTML
        image: Lead image, if any
    """

    title: str | None = None
    teaser: str | None = None
    content: str | None = None
    image: ArticleImage | None = None

    model_config = {"extra": "allow"}

    @property
    def image_url(self) -> str | None:
        if self.image is None or self.image.original is None:
            return None
        return self.image.original.url


class ChannelLocalization(BaseModel):
    """Localized channel metadata."""

    title: str | None = None

    model_config = {"extra": "allow"}


class ChannelConfig(BaseModel):
    localization: dict[str, Any] | None = None

    model_config = {"extra": "allow"}


class Channel(BaseModel):
    """The channel an article was posted to."""

    config: ChannelConfig | None = None

    model_config = {"extra": "allow"}

    def title_for(self, language: str) -> str | None:
        """Return the channel title for a language, if localized."""
        if self.config is None or not self.config.localization:
            return None
        localization = _validate_entry(
            ChannelLocalization,
            self.config.localization.get(language),
            f"channel localization {language}",
        )
        return localization.title if localization is not None else None


class RawArticleData(BaseModel):
    """An article document as returned by the article API.

    Attributes:
        contents: Localized entries keyed by language code
        published: Publication flag; any truthy value counts as published
        channel: Channel the article belongs to
    """

    contents: dict[str, Any] | None = None
    published: Any = None
    channel: Channel | None = None

    model_config = {"extra": "allow"}

    def content_for(self, language: str) -> LocalizedContent | None:
        """Return the localized entry for a language, if present and valid."""
        if not self.contents:
            return None
        return _validate_entry(
            LocalizedContent, self.contents.get(language), f"content {language}"
        )
