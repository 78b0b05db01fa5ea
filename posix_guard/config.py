"""
posix-guard configuration settings.

Loads settings from environment variables via pydantic-settings, and
product profiles (name and message wording) from data/products.yaml.
"""

import logging
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("posix_guard.config")

DEFAULT_ALTERNATIVE = "Windows Subsystem for Linux"
DEFAULT_ERROR_TEMPLATE = '"{product}" only supports POSIX compatible systems.'
DEFAULT_SUGGESTION_TEMPLATE = (
    'Please try again with alternatives such as "{alternative}" to install "{product}".'
)

# Placeholders a message template may use
TEMPLATE_FIELDS = frozenset({"product", "alternative"})


class Settings(BaseSettings):
    guard_product: str = "easy-checks"         # Profile key in products.yaml
    guard_profiles_path: Path = Path(__file__).parent / "data" / "products.yaml"
    guard_script_name: str = "preinstall.py"   # Prefix on each diagnostic line
    guard_log_level: str = "WARNING"           # Anything below WARNING is quiet on stderr by default

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent / ".env"),
        extra="ignore",  # Allow extra env vars without errors
    )


@dataclass(frozen=True)
class ProductProfile:
    """Product name and message wording for one guarded package."""

    key: str
    name: str
    alternative: str = DEFAULT_ALTERNATIVE
    error_template: str = DEFAULT_ERROR_TEMPLATE
    suggestion_template: str = DEFAULT_SUGGESTION_TEMPLATE


DEFAULT_PROFILES: dict[str, ProductProfile] = {
    "easy-checks": ProductProfile(key="easy-checks", name="Salesforce Easy Checks"),
    "easy-deployments": ProductProfile(key="easy-deployments", name="Salesforce Easy Deployments"),
}


def _check_template(key: str, template: str) -> str:
    """Reject templates that would fail to render with the known placeholders."""
    if not isinstance(template, str):
        raise ValueError(f"Product profile '{key}' template must be a string: {template!r}")
    try:
        fields = {name for _, name, _, _ in string.Formatter().parse(template) if name is not None}
    except ValueError as e:
        raise ValueError(f"Product profile '{key}' has a malformed template {template!r}: {e}") from e

    unknown = fields - TEMPLATE_FIELDS
    if unknown:
        raise ValueError(
            f"Product profile '{key}' template uses unknown placeholder(s) "
            f"{', '.join(sorted(unknown))}: {template!r}"
        )
    return template


def _normalize_profile(key: str, value) -> ProductProfile:
    """Build a ProductProfile from one YAML entry.

    Handles:
    - str -> profile with that product name and default wording (shorthand)
    - dict with 'name' key -> profile with optional overrides
    Empty values (e.g. `alternative:`) fall back to the defaults.
    """
    if isinstance(value, str):
        return ProductProfile(key=key, name=value)

    if not isinstance(value, dict) or not value.get("name"):
        raise ValueError(f"Product profile '{key}' missing 'name' field: {value!r}")

    return ProductProfile(
        key=key,
        name=str(value["name"]),
        alternative=str(value.get("alternative") or DEFAULT_ALTERNATIVE),
        error_template=_check_template(key, value.get("error_template") or DEFAULT_ERROR_TEMPLATE),
        suggestion_template=_check_template(
            key, value.get("suggestion_template") or DEFAULT_SUGGESTION_TEMPLATE
        ),
    )


def load_profiles(path: Path) -> dict[str, ProductProfile]:
    """Load product profiles from YAML, falling back to the built-in set."""
    if not path.exists():
        logger.info("No product profiles at %s - using built-in defaults", path)
        return dict(DEFAULT_PROFILES)

    with open(path) as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid product profiles in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Product profiles in {path} must be a mapping, got {type(raw).__name__}")

    if not raw:
        return dict(DEFAULT_PROFILES)

    return {str(key): _normalize_profile(str(key), value) for key, value in raw.items()}


def get_profile(key: Optional[str] = None, settings: Optional[Settings] = None) -> ProductProfile:
    """Resolve a product profile by key (defaults to GUARD_PRODUCT)."""
    if settings is None:
        settings = Settings()
    if key is None:
        key = settings.guard_product

    profiles = load_profiles(settings.guard_profiles_path)
    try:
        return profiles[key]
    except KeyError:
        known = ", ".join(sorted(profiles))
        raise ValueError(f"Unknown product profile '{key}' (known: {known})") from None
