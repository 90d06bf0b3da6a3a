"""Per-field localization selection with default-language fallback."""

import logging

from schemas.article import LocalizedContent, RawArticleData
from schemas.resolved import Absent, ResolvedArticle

logger = logging.getLogger(__name__)


def _first(*values: str | None) -> str:
    for value in values:
        if value is not None:
            return value
    return ""


def select_fields(
    raw: RawArticleData | None,
    effective_language: str,
    default_language: str,
) -> ResolvedArticle | Absent:
    """Pick the fields to display for an article.

    The entry for the effective language is used when present, otherwise
    the default language entry. Each field missing from the chosen entry
    falls back to the default language entry, then to an empty string.
    The channel name follows its own fallback over the channel's
    localization map.

    Args:
        raw: Article document from the API
        effective_language: Language to display
        default_language: Process-wide fallback language

    Returns:
        The resolved article, or Absent when no entry can be displayed
    """
    if raw is None or raw.contents is None:
        detail = "Invalid article data or missing contents"
        logger.error(f"Error resolving article content: {detail}")
        return Absent(reason="missing_contents", detail=detail)

    primary = raw.content_for(effective_language)
    if primary is None:
        logger.warning(
            f"Content for language {effective_language} not found. "
            f"Falling back to default language {default_language}."
        )
        primary = raw.content_for(default_language)

    if primary is None:
        detail = (
            f"Content not available in language: {effective_language} "
            f"or default language: {default_language}"
        )
        logger.error(detail)
        return Absent(reason="missing_language_content", detail=detail)

    fallback = raw.content_for(default_language) or LocalizedContent()

    channel_name = ""
    if raw.channel is not None:
        channel_name = _first(
            raw.channel.title_for(effective_language),
            raw.channel.title_for(default_language),
        )

    return ResolvedArticle(
        title=_first(primary.title, fallback.title),
        teaser=_first(primary.teaser, fallback.teaser),
        content=_first(primary.content, fallback.content),
        image_url=_first(primary.image_url, fallback.image_url),
        channel_name=channel_name,
        publication_status="Published" if raw.published else "Unpublished",
    )
