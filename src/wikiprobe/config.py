"""Loading ``appsettings.json`` into a :class:`HarnessConfig`."""
from __future__ import annotations

import json
import os
import re
from pathlib import Path

from pydantic import ValidationError

from wikiprobe.exceptions import ConfigurationError
from wikiprobe.models.config import HarnessConfig

CONFIG_ENV_VAR = "WIKIPROBE_CONFIG"
DEFAULT_CONFIG_NAME = "appsettings.json"

# Strings are matched first so "//" inside a URL is left alone
_COMMENT_RE = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.DOTALL)
_TRAILING_COMMA_RE = re.compile(r'("(?:\\.|[^"\\])*")|,(\s*[}\]])')


def _strip_json_extensions(text: str) -> str:
    """Remove comments and trailing commas so ``json`` can parse the text."""
    text = _COMMENT_RE.sub(lambda m: m.group(1) or "", text)
    return _TRAILING_COMMA_RE.sub(lambda m: m.group(1) or m.group(2), text)


def find_config_file(config_path: str | Path | None = None) -> Path:
    """Resolve the configuration file location.

    Order: explicit path, ``$WIKIPROBE_CONFIG``, ``./appsettings.json``.
    """
    if config_path:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_CONFIG_NAME


def parse_config(text: str) -> HarnessConfig:
    """Parse and validate configuration JSON.

    Comments and trailing commas are accepted.

    Raises:
        ConfigurationError: On empty input, invalid JSON or failed validation.
    """
    if not text or not text.strip():
        raise ConfigurationError(
            "Configuration file is empty. Please provide valid configuration in appsettings.json."
        )

    try:
        data = json.loads(_strip_json_extensions(text))
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON format in appsettings.json: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration must be a JSON object, got {type(data).__name__}"
        )

    try:
        return HarnessConfig.model_validate(data)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            field_path = ".".join(str(loc) for loc in error["loc"])
            errors.append(f"{field_path}: {error['msg']}")
        raise ConfigurationError("Configuration validation failed", errors=errors) from e


def load_config(config_path: str | Path | None = None) -> HarnessConfig:
    """Load the harness configuration from disk.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    path = find_config_file(config_path)
    if not path.is_file():
        raise ConfigurationError(
            f"Configuration file not found at: {path}. "
            "Please ensure appsettings.json exists in the project root."
        )

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration: {e}") from e

    return parse_config(text)
