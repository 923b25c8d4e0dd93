"""Configuration loading with layered overrides."""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from fscheck.core.context import Context

PROJECT_CONFIG = Path(".fscheck.yaml")

# Running with no arguments and no config files is 'check_fs -f / -t per -w 90 -c 98'
DEFAULTS: dict[str, Any] = {
    "path": "/",
    "metric": "per",
    "warning": 90,
    "critical": 98,
    "log_dir": None,
    "format": "plain",
}

# Keys whose values must be strings when set
STRING_KEYS = ("path", "metric", "log_dir", "format")


class ConfigError(Exception):
    """Invalid configuration file or value."""

    pass


@dataclass(frozen=True)
class CheckSpec:
    """What to check, built once per invocation."""

    path: str
    metric: str
    warning: int | float
    critical: int | float


def _default_context(context: "Context | None") -> "Context":
    if context is None:
        from fscheck.core.context import Context
        context = Context()
    return context


def user_config_path(context: "Context | None" = None) -> Path:
    """Per-user config file location, honouring XDG_CONFIG_HOME."""
    context = _default_context(context)
    xdg = context.get_env("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "fscheck" / "config.yaml"


def load_config_file(path: Path, context: "Context | None" = None) -> dict[str, Any]:
    """
    Load a YAML config file if it exists.

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping, or
            holds keys fscheck does not know, or a value of the wrong type
    """
    context = _default_context(context)
    if not context.file_exists(str(path)):
        return {}
    try:
        data = yaml.safe_load(context.read_file(str(path)))
    except yaml.YAMLError as e:
        raise ConfigError(f'Invalid YAML in config file "{path}": {e}')
    except OSError as e:
        raise ConfigError(f'Cannot read config file "{path}": {e.strerror or e}')
    except UnicodeDecodeError:
        raise ConfigError(f'Config file "{path}" is not valid UTF-8') from None

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f'Config file "{path}" must be a YAML mapping')

    unknown = set(data) - set(DEFAULTS)
    if unknown:
        raise ConfigError(
            f'Unknown keys in config file "{path}": {", ".join(sorted(unknown))}'
        )

    for key in STRING_KEYS:
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigError(f'Config key "{key}" in "{path}" must be a string, not {value!r}')
        if "\0" in value:
            raise ConfigError(f'Config key "{key}" in "{path}" contains a null byte')
    return data


def load_settings(
    config_path: Path | None = None,
    context: "Context | None" = None,
) -> dict[str, Any]:
    """
    Merge settings with explicit file -> project -> user -> defaults precedence.

    Args:
        config_path: File given with --config; it must exist
        context: Execution context (for testing)

    Returns:
        Settings dict with every key of DEFAULTS present
    """
    context = _default_context(context)
    settings = dict(DEFAULTS)
    settings.update(load_config_file(user_config_path(context), context))
    settings.update(load_config_file(PROJECT_CONFIG, context))

    if config_path is not None:
        if not context.file_exists(str(config_path)):
            raise ConfigError(f'Config file "{config_path}" not found')
        settings.update(load_config_file(config_path, context))

    return settings


def parse_threshold(value: Any, name: str) -> int | float:
    """
    Parse a threshold into a number.

    Integral values come back as int so they print without a decimal point.

    Raises:
        ConfigError: If value is not a finite number
    """
    if isinstance(value, bool):
        raise ConfigError(f"Invalid {name} threshold: {value!r}")
    if isinstance(value, (int, float)):
        number = value
    else:
        text = str(value).strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise ConfigError(f'Invalid {name} threshold: "{value}"') from None

    if isinstance(number, float):
        if not math.isfinite(number):
            raise ConfigError(f'Invalid {name} threshold: "{value}"')
        if number.is_integer():
            return int(number)
    return number


def build_spec(settings: dict[str, Any], overrides: dict[str, Any] | None = None) -> CheckSpec:
    """
    Build the immutable check request.

    Args:
        settings: Merged settings from load_settings()
        overrides: Command-line values; None entries are ignored

    Returns:
        CheckSpec with parsed thresholds
    """
    merged = dict(settings)
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value

    return CheckSpec(
        path=str(merged["path"]),
        metric=str(merged["metric"]),
        warning=parse_threshold(merged["warning"], "warning"),
        critical=parse_threshold(merged["critical"], "critical"),
    )
