"""Generator configuration.

Options are layered, lowest precedence first:
1. built-in defaults
2. a YAML config file (staticmcp.yaml in the source root by default)
3. STATICMCP_* environment variables
4. explicit overrides (command-line flags); None values are ignored
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from staticmcp.constants import (
    CONFIG_FILE,
    DEFAULT_BASE_URI,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PROTOCOL_VERSION,
    DEFAULT_SERVER_NAME,
    DEFAULT_SERVER_VERSION,
)
from staticmcp.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "STATICMCP_"


@dataclass(frozen=True)
class GeneratorOptions:
    """Settings for one generator run."""

    output_dir: str = DEFAULT_OUTPUT_DIR
    server_name: str = DEFAULT_SERVER_NAME
    server_version: str = DEFAULT_SERVER_VERSION
    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    base_uri: str = DEFAULT_BASE_URI

    @classmethod
    def field_names(cls) -> set:
        return {f.name for f in fields(cls)}


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", details={"path": str(path)}) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must contain a mapping: {path}", details={"path": str(path)}
        )

    # YAML users write server-name as often as server_name
    return {str(key).replace("-", "_"): value for key, value in data.items()}


def _env_values() -> Dict[str, str]:
    values = {}
    for name in GeneratorOptions.field_names():
        env_value = os.getenv(ENV_PREFIX + name.upper())
        if env_value:
            values[name] = env_value
    return values


def _validate(values: Dict[str, Any], origin: str) -> Dict[str, str]:
    unknown = sorted(set(values) - GeneratorOptions.field_names())
    if unknown:
        raise ConfigError(
            f"Unknown option(s) in {origin}: {', '.join(unknown)}",
            details={"unknown": unknown},
        )
    return {key: str(value) for key, value in values.items()}


def load_options(
    config_path: Optional[Union[str, Path]] = None,
    source_root: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> GeneratorOptions:
    """Build GeneratorOptions from defaults, config file, env and overrides.

    Args:
        config_path: Explicit config file; must exist when given
        source_root: Site root searched for staticmcp.yaml when no
            config_path is given
        **overrides: Option values that win over everything else

    Raises:
        ConfigError: Missing explicit config file, invalid YAML, or
            unknown option names
    """
    options = GeneratorOptions()

    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Missing config file: {path}", details={"path": str(path)})
    elif source_root is not None:
        path = Path(source_root) / CONFIG_FILE
    else:
        path = None

    if path is not None and path.is_file():
        logger.debug(f"Loading config from {path}")
        options = replace(options, **_validate(_read_config_file(path), str(path)))

    env_values = _env_values()
    if env_values:
        options = replace(options, **env_values)

    explicit = {key: value for key, value in overrides.items() if value is not None}
    if explicit:
        options = replace(options, **_validate(explicit, "overrides"))

    return options
