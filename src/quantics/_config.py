"""Package defaults and their environment overrides."""

import logging
import os

logger = logging.getLogger(__name__)

# Environment variable overriding the default unfolding scheme
UNFOLDING_ENV_VAR = "QUANTICS_UNFOLDING"

DEFAULT_BASE = 2
DEFAULT_UNFOLDING = "fused"


def default_unfolding_name() -> str:
    """Get the default unfolding scheme name.

    Returns the value of ``QUANTICS_UNFOLDING`` when set and non-empty,
    otherwise ``"fused"``. The variable is read on every call so that it
    can be changed at runtime.
    """
    env_value = os.environ.get(UNFOLDING_ENV_VAR, "").strip()
    if env_value:
        logger.debug("Default unfolding scheme overridden by %s=%r", UNFOLDING_ENV_VAR, env_value)
        return env_value
    return DEFAULT_UNFOLDING
