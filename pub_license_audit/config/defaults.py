"""Policy defaults used when a project has no policy file."""

from __future__ import annotations

from pub_license_audit.models.config import PolicyConfig

# Policy file names looked up in the project directory, in priority order
DEFAULT_CONFIG_NAMES = ["license_checker.yaml", "license_checker.yml"]


def get_default_config() -> PolicyConfig:
    """Build the empty policy.

    Nothing is permitted, rejected or approved under it, so every package
    with a recognized license ends up as needsApproval.

    Returns:
        An empty PolicyConfig.
    """
    return PolicyConfig()
