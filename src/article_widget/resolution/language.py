"""Effective language detection from host signals.

The host exposes two override signals: in the editor, the active language
tab carries a marker such as ``language-tab-fr_FR``; in the viewer, the page
URL may carry a ``language`` query parameter. Both are read through injected
zero-argument callables so the resolver never touches host state itself.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Literal
from urllib.parse import parse_qs

logger = logging.getLogger(__name__)

Mode = Literal["editor", "viewer"]

EditorSignalSource = Callable[[], str | None]
UrlSignalSource = Callable[[], str | Mapping[str, str] | None]

LANGUAGE_PARAMETER = "language"


def tab_marker_source(marker: str | None) -> EditorSignalSource:
    """Build an editor signal source that always reports the given tab marker."""
    return lambda: marker


def query_string_source(query: str | Mapping[str, str] | None) -> UrlSignalSource:
    """Build a URL signal source from a query string or parameter mapping."""
    return lambda: query


def language_from_tab_marker(marker: str | None) -> str | None:
    """Extract the language tag from an active-tab marker.

    The tag is whatever follows the last hyphen, so ``language-tab-fr_FR``
    yields ``fr_FR``. Returns None for a missing or non-string marker or an
    empty tag.
    """
    if not isinstance(marker, str) or not marker:
        return None
    tag = marker.strip().split("-")[-1]
    return tag or None


def language_from_query(params: str | Mapping[str, str] | None) -> str | None:
    """Read the ``language`` parameter from a query string or mapping.

    Only a non-empty string counts as a language; anything else is ignored.
    """
    if isinstance(params, str):
        values = parse_qs(params.lstrip("?")).get(LANGUAGE_PARAMETER)
        return values[0] if values else None
    if not isinstance(params, Mapping) or not params:
        return None
    value = params.get(LANGUAGE_PARAMETER)
    return value if isinstance(value, str) and value else None


def _read(source: Callable | None, name: str) -> Any:
    if source is None:
        return None
    try:
        return source()
    except Exception as e:
        logger.warning(f"Could not read {name} signal, ignoring it: {e}")
        return None


def resolve_language(
    mode: Mode,
    editor_source: EditorSignalSource | None,
    url_source: UrlSignalSource | None,
    requested_language: str,
) -> str:
    """Determine the language to display content in.

    In editor mode the active language tab wins; in viewer mode the URL
    ``language`` parameter wins. Without a usable signal the requested
    language is returned. Never raises.

    Args:
        mode: "editor" or "viewer"
        editor_source: Returns the active tab marker, or None
        url_source: Returns the page query string or parameters, or None
        requested_language: Language configured on the widget

    Returns:
        The effective language code
    """
    if mode == "editor":
        language = language_from_tab_marker(_read(editor_source, "editor tab"))
    else:
        language = language_from_query(_read(url_source, "URL parameter"))

    if language and language != requested_language:
        logger.debug(f"Language overridden in {mode} mode: {language}")

    return language or requested_language
