"""Resolved article and resolution outcome schemas."""

from typing import Literal

from pydantic import BaseModel, Field

PublicationStatus = Literal["Published", "Unpublished"]
AbsentReason = Literal["missing_contents", "missing_language_content"]
OutcomeStatus = Literal[
    "resolved",
    "skipped",
    "fetch_failed",
    "missing_contents",
    "missing_language_content",
    "superseded",
]


class ResolvedArticle(BaseModel):
    """Article fields ready for display.

    Every text field falls back to an empty string, so consumers never
    need to handle missing values.

    Attributes:
        title: Article headline
        teaser: Short summary
        content: Article body as HTML
        image_url: URL of the lead image
        channel_name: Localized name of the article's channel
        publication_status: "Published" or "Unpublished"
    """

    title: str = ""
    teaser: str = ""
    content: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    channel_name: str = Field(default="", alias="channelName")
    publication_status: PublicationStatus = Field(
        default="Unpublished", alias="publicationStatus"
    )

    model_config = {"frozen": True, "populate_by_name": True}


class Absent(BaseModel):
    """Marker for an article with no displayable content."""

    reason: AbsentReason
    detail: str = ""

    model_config = {"frozen": True}


class ResolutionOutcome(BaseModel):
    """Result of one resolution cycle.

    Attributes:
        status: How the cycle ended
        article_id: Identifier the cycle was started for
        language: Effective language used for selection, when one was resolved
        article: The resolved article, only set when status is "resolved"
        error: Description of the failure, if any
    """

    status: OutcomeStatus
    article_id: str | None = None
    language: str | None = None
    article: ResolvedArticle | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "resolved"
