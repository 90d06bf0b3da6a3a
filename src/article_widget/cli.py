"""Command-line interface for article-widget."""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from article_widget.clients import ArticleClient, ClientError, MediaClient
from article_widget.config import (
    ENV_API_URL,
    ENV_DEFAULT_LANGUAGE,
    SettingsError,
    WidgetSettings,
    load_settings,
)
from article_widget.resolution import (
    ArticleResolver,
    query_string_source,
    tab_marker_source,
)
from schemas.resolved import ResolutionOutcome

DEFAULT_DIST_DIR = Path("./dist")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _load_settings(args: argparse.Namespace) -> WidgetSettings:
    """Load settings, letting command-line flags override the environment."""
    load_dotenv(find_dotenv(usecwd=True))
    env = dict(os.environ)
    if getattr(args, "base_url", None):
        env[ENV_API_URL] = args.base_url
    if getattr(args, "default_language", None):
        env[ENV_DEFAULT_LANGUAGE] = args.default_language
    return load_settings(env)


async def _run_resolve(
    settings: WidgetSettings, args: argparse.Namespace
) -> ResolutionOutcome:
    async with ArticleClient(settings.client_config()) as client:
        resolver = ArticleResolver(
            client,
            default_language=settings.default_language,
            mode=args.mode,
            editor_source=tab_marker_source(args.editor_tab),
            url_source=query_string_source(args.url_params),
        )
        return await resolver.resolve(args.article_id, args.language)


def resolve(args: argparse.Namespace) -> int:
    """Execute the resolve command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = _load_settings(args)
    except SettingsError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    language = args.language or settings.default_language
    args.language = language

    logger.info(f"Resolving article {args.article_id} ({args.mode} mode, {language})")
    outcome = asyncio.run(_run_resolve(settings, args))

    if not outcome.ok:
        logger.error(f"Could not resolve article {args.article_id}: {outcome.status}")
        if outcome.error:
            logger.error(f"  {outcome.error}")
        return 1

    logger.info(f"  Language: {outcome.language}")
    print(outcome.article.model_dump_json(by_alias=True, indent=2))
    return 0


async def _run_upload(settings: WidgetSettings, file_path: Path):
    async with MediaClient(settings.client_config()) as client:
        return await client.upload(file_path, f"{settings.build_file_name}.js")


def upload(args: argparse.Namespace) -> int:
    """Execute the upload command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = _load_settings(args)
    except SettingsError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    if not settings.auth_token:
        logger.error("An auth token is required to upload (set WIDGET_AUTH_TOKEN)")
        return 1

    file_path = args.file or DEFAULT_DIST_DIR / f"{settings.build_file_name}.js"
    if not file_path.exists():
        logger.error(f"Bundle not found: {file_path}")
        return 1

    try:
        media = asyncio.run(_run_upload(settings, file_path))
    except ClientError as e:
        logger.error(f"Failed to upload file: {e}")
        return 1

    logger.info(f"File uploaded successfully: {media.id}")
    logger.info(f"  Resource URL: {media.resource_info.url}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="article-widget",
        description="Resolve localized article content and upload widget bundles",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Fetch an article and resolve its localized fields",
        description="Fetch an article from the CMS API and print the fields the widget would display.",
    )
    resolve_parser.add_argument(
        "--article-id",
        type=str,
        required=True,
        help="Identifier of the article to resolve",
    )
    resolve_parser.add_argument(
        "--language",
        type=str,
        default=None,
        help="Requested content language (default: the default language)",
    )
    resolve_parser.add_argument(
        "--mode",
        choices=["editor", "viewer"],
        default="viewer",
        help="Where the widget runs, which decides the override signal used (default: viewer)",
    )
    resolve_parser.add_argument(
        "--editor-tab",
        type=str,
        default=None,
        help="Active language tab marker in editor mode (e.g. language-tab-fr_FR)",
    )
    resolve_parser.add_argument(
        "--url-params",
        type=str,
        default=None,
        help="Page query string in viewer mode (e.g. language=de_DE)",
    )
    resolve_parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help=f"CMS API base URL (default: ${ENV_API_URL})",
    )
    resolve_parser.add_argument(
        "--default-language",
        type=str,
        default=None,
        help=f"Fallback content language (default: ${ENV_DEFAULT_LANGUAGE} or en_US)",
    )
    resolve_parser.set_defaults(func=resolve)

    upload_parser = subparsers.add_parser(
        "upload",
        help="Upload the built widget bundle to the media API",
        description="Upload the built widget bundle as a raw media resource.",
    )
    upload_parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help=f"Bundle to upload (default: {DEFAULT_DIST_DIR}/<build file name>.js)",
    )
    upload_parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help=f"CMS API base URL (default: ${ENV_API_URL})",
    )
    upload_parser.set_defaults(func=upload)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
