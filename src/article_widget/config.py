"""Widget settings loaded from the environment."""

import logging
import os
from collections.abc import Mapping

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en_US"
DEFAULT_BUILD_FILE_NAME = "widget"

ENV_API_URL = "WIDGET_API_URL"
ENV_DEFAULT_LANGUAGE = "WIDGET_DEFAULT_LANGUAGE"
ENV_AUTH_TOKEN = "WIDGET_AUTH_TOKEN"
ENV_BUILD_FILE_NAME = "WIDGET_BUILD_FILE_NAME"
ENV_TIMEOUT = "WIDGET_TIMEOUT"


class SettingsError(Exception):
    """Raised when the widget settings are missing or invalid."""

    def __init__(self, message: str, errors: list | None = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class WidgetSettings(BaseModel):
    """Process-wide widget configuration, read once at startup.

    Attributes:
        api_url: Base URL of the CMS API
        default_language: Fallback content language
        auth_token: Basic auth token for the media API
        build_file_name: Bundle name, without the .js extension
        timeout: HTTP timeout in seconds
    """

    api_url: str
    default_language: str = DEFAULT_LANGUAGE
    auth_token: str | None = None
    build_file_name: str = DEFAULT_BUILD_FILE_NAME
    timeout: float = 30

    model_config = {"frozen": True}

    def client_config(self, **overrides) -> dict:
        """Build the dict config accepted by the API clients."""
        config = {"base_url": self.api_url, "timeout": self.timeout}
        if self.auth_token:
            config["auth_token"] = self.auth_token
        config.update(overrides)
        return config


def load_settings(env: Mapping[str, str] | None = None) -> WidgetSettings:
    """Load settings from the environment.

    A ``.env`` file in the working directory is loaded first when reading
    from the process environment. Values already set in the environment
    take precedence over the file.

    Args:
        env: Mapping to read instead of os.environ

    Returns:
        The validated settings

    Raises:
        SettingsError: If the API URL is missing or a value is invalid
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    api_url = env.get(ENV_API_URL)
    if not api_url:
        raise SettingsError(f"{ENV_API_URL} is not set")

    values: dict = {"api_url": api_url}
    optional = {
        "default_language": ENV_DEFAULT_LANGUAGE,
        "auth_token": ENV_AUTH_TOKEN,
        "build_file_name": ENV_BUILD_FILE_NAME,
        "timeout": ENV_TIMEOUT,
    }
    for field_name, env_name in optional.items():
        if env.get(env_name):
            values[field_name] = env[env_name]

    try:
        settings = WidgetSettings.model_validate(values)
    except ValidationError as e:
        raise SettingsError(
            "Invalid widget settings",
            errors=[str(err) for err in e.errors()],
        ) from e

    logger.debug(f"Loaded settings for {settings.api_url}")
    return settings
