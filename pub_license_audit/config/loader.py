"""License policy file discovery and loading for pub-license-audit."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pub_license_audit.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from pub_license_audit.exceptions import ConfigurationError
from pub_license_audit.models.config import PolicyConfig


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Locate the policy file of a project.

    `license_checker.yaml` wins over `license_checker.yml` when both exist.
    Parent directories are not searched; the policy belongs next to
    pubspec.yaml.

    Args:
        start_dir: Project directory. Defaults to the current directory.

    Returns:
        Path of the policy file, or None when the project has none.
    """
    project_dir = start_dir if start_dir is not None else Path.cwd()
    candidates = (project_dir / name for name in DEFAULT_CONFIG_NAMES)
    return next((path for path in candidates if path.is_file()), None)


def _read_policy_data(path: Path) -> dict[str, Any] | None:
    """Read the raw YAML mapping of a policy file.

    Returns None for a file with no content (blank or comments only).
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read policy file '{path}': {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is None or isinstance(data, dict):
        return data
    raise ConfigurationError(
        f"Invalid policy in '{path}': "
        f"expected a mapping at root level, got {type(data).__name__}"
    )


def load_config_file(path: Path) -> PolicyConfig:
    """Load and validate a license policy file.

    Args:
        path: Path to the policy file.

    Returns:
        Validated PolicyConfig. An empty file gives the empty policy.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or does not describe a valid policy.
    """
    data = _read_policy_data(path)
    if data is None:
        return get_default_config()

    try:
        return PolicyConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid policy in '{path}': {_format_validation_errors(e)}"
        ) from e


def _format_validation_errors(error: ValidationError) -> str:
    """Join pydantic errors as `key.path: message` pairs.

    Locations use the YAML key names (e.g. `permittedLicenses.0`).
    """
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
        for err in error.errors()
    )


def load_config(
    config_path: str | None = None,
    start_dir: Path | None = None,
) -> PolicyConfig:
    """Resolve the policy for a run.

    An explicit config_path always wins. Without one, the project directory
    is searched, and a project without a policy file gets the empty policy.

    Args:
        config_path: Policy file given on the command line.
        start_dir: Project directory searched when config_path is None.

    Returns:
        The PolicyConfig for the run.

    Raises:
        ConfigurationError: If the chosen policy file is invalid.
    """
    path = Path(config_path) if config_path is not None else find_config_file(start_dir)
    if path is None:
        return get_default_config()
    return load_config_file(path)
