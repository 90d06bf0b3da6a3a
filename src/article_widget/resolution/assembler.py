"""Resolution cycles: fetch, detect language, select, publish."""

import logging

from article_widget.clients import ArticleClient, ClientError
from schemas.resolved import Absent, ResolutionOutcome, ResolvedArticle

from .language import EditorSignalSource, Mode, UrlSignalSource, resolve_language
from .selector import select_fields

logger = logging.getLogger(__name__)


class ArticleResolver:
    """Runs resolution cycles for a single widget instance.

    Each cycle fetches the article, resolves the effective language from
    the injected signal sources and selects the localized fields. The last
    successfully resolved article is kept in ``current``; failed cycles
    leave it untouched.

    Cycles may overlap when the identifier changes quickly. Every cycle is
    numbered when it starts and only the most recently started one may
    publish its result; earlier ones finish as "superseded".

    Example:
        async with ArticleClient(config) as client:
            resolver = ArticleResolver(client, default_language="en_US")
            outcome = await resolver.resolve("66ce0559b660075a0efc7800", "de_DE")
    """

    def __init__(
        self,
        client: ArticleClient,
        default_language: str,
        mode: Mode = "viewer",
        editor_source: EditorSignalSource | None = None,
        url_source: UrlSignalSource | None = None,
    ):
        self.client = client
        self.default_language = default_language
        self.mode = mode
        self.editor_source = editor_source
        self.url_source = url_source

        self.current: ResolvedArticle | None = None
        self._sequence = 0
        self._last_article_id: str | None = None

    @property
    def sequence(self) -> int:
        """Number of the most recently started cycle."""
        return self._sequence

    async def update(
        self, article_id: str | None, requested_language: str
    ) -> ResolutionOutcome | None:
        """Run a cycle if the article identifier changed.

        Language-only changes do not trigger a cycle; call resolve()
        directly to force one.

        Returns:
            The cycle's outcome, or None if nothing was triggered
        """
        if article_id == self._last_article_id:
            return None
        self._last_article_id = article_id
        return await self.resolve(article_id, requested_language)

    async def resolve(
        self, article_id: str | None, requested_language: str
    ) -> ResolutionOutcome:
        """Run a full resolution cycle.

        Args:
            article_id: Article to display; empty identifiers are skipped
            requested_language: Content language configured on the widget

        Returns:
            The outcome of the cycle
        """
        if not article_id:
            logger.debug("No article identifier, skipping resolution")
            return ResolutionOutcome(status="skipped")

        self._sequence += 1
        sequence = self._sequence

        try:
            raw = await self.client.fetch(article_id)
        except ClientError as e:
            logger.error(f"Error fetching article content for {article_id}: {e}")
            return ResolutionOutcome(
                status="fetch_failed", article_id=article_id, error=str(e)
            )

        if sequence != self._sequence:
            logger.debug(
                f"Discarding article {article_id}: cycle {sequence} "
                f"superseded by cycle {self._sequence}"
            )
            return ResolutionOutcome(status="superseded", article_id=article_id)

        language = resolve_language(
            self.mode, self.editor_source, self.url_source, requested_language
        )
        selection = select_fields(raw, language, self.default_language)

        if isinstance(selection, Absent):
            return ResolutionOutcome(
                status=selection.reason,
                article_id=article_id,
                language=language,
                error=selection.detail,
            )

        self.current = selection
        return ResolutionOutcome(
            status="resolved",
            article_id=article_id,
            language=language,
            article=selection,
        )
