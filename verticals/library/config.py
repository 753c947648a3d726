"""Library vertical configuration.

Builds the LendingConfig from the environment once, at import time.
"""

from patterns.domain_config import LendingConfig

# Default configuration instance
config = LendingConfig.from_env()
