"""Schema definitions for article-widget."""

from .article import (
    ArticleImage,
    Channel,
    ChannelConfig,
    ChannelLocalization,
    ImageVariant,
    LocalizedContent,
    RawArticleData,
)
from .media import MediaUploadResponse, ResourceInfo
from .resolved import Absent, ResolutionOutcome, ResolvedArticle

__all__ = [
    "Absent",
    "ArticleImage",
    "Channel",
    "ChannelConfig",
    "ChannelLocalization",
    "ImageVariant",
    "LocalizedContent",
    "MediaUploadResponse",
    "RawArticleData",
    "ResolutionOutcome",
    "ResolvedArticle",
    "ResourceInfo",
]
