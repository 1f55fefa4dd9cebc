"""
Configuration Management.

Loads overrides from the environment (and config/.env) and settings from
config/settings/*.yaml.

Environment (EBISEARCH_ prefix):
    EBISEARCH_BASE_URL, EBISEARCH_TIMEOUT

Settings (YAML):
    application.yaml   - Client identity, service endpoint, timeouts
    logging.yaml       - Logging configuration

Per-invocation options (base URL, output level, debug level) are resolved
once by the CLI into a ClientOptions value and passed explicitly to the
service and printers.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ebisearch.core.config_schema import ApplicationSchema, LoggingSchema

DEFAULT_OUTPUT_LEVEL = 1


def _search_upwards(start: Path) -> Path | None:
    current = start
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    return None


def find_project_root(start: Path | None = None) -> Path:
    """
    Find project root by looking for .project_root marker file.

    Searches upwards from ``start``. Without ``start`` the current working
    directory is searched first, then the checkout this package lives in,
    so `python <checkout>/cli.py` works from any directory. config/ is not
    packaged; the client runs from a checkout, not from site-packages.
    """
    if start is not None:
        found = _search_upwards(start)
    else:
        found = _search_upwards(Path.cwd()) or _search_upwards(Path(__file__).resolve().parent)
    if found is None:
        raise RuntimeError("Project root not found. Ensure .project_root file exists.")
    return found


def validate_project_root() -> Path:
    """
    Validate that the project root can be found.

    Raises SystemExit with a clear message if .project_root is not found.
    Use this in entry scripts before any configuration loading.
    """
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Environment overrides. Unset values fall back to application.yaml."""

    base_url: str | None = None
    timeout: float | None = Field(default=None, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="EBISEARCH_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached environment overrides. Resolves .env path from project root."""
    env_path = find_project_root() / "config" / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


class ClientOptions(BaseModel):
    """Options for one CLI invocation."""

    base_url: str = Field(min_length=1)
    timeout: float = Field(gt=0)
    output_level: int = DEFAULT_OUTPUT_LEVEL
    debug_level: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


def get_service_base_url() -> tuple[str, float]:
    """
    Get the service base URL and request timeout.

    Environment overrides win over application.yaml.

    Returns:
        Tuple of (base_url, timeout_seconds).
    """
    app = get_app_config().application
    settings = get_settings()
    base_url = settings.base_url or app.service.base_url
    timeout = settings.timeout if settings.timeout is not None else float(app.timeouts.request)
    return base_url, timeout


def resolve_client_options(
    base_url: str | None = None,
    verbose: bool = False,
    quiet: bool = False,
    debug_level: int = 0,
) -> ClientOptions:
    """
    Build the options for one invocation from command-line flags.

    Args:
        base_url: --baseUrl value; wins over environment and YAML.
        verbose: --verbose, raises the output level by one.
        quiet: --quiet, lowers the output level by one.
        debug_level: --debugLevel threshold.
    """
    configured_url, timeout = get_service_base_url()

    output_level = DEFAULT_OUTPUT_LEVEL
    if verbose:
        output_level += 1
    if quiet:
        output_level -= 1

    return ClientOptions(
        base_url=(base_url or configured_url).rstrip("/"),
        timeout=timeout,
        output_level=output_level,
        debug_level=debug_level,
    )
