"""Package metadata and naming constants."""

PACKAGE_NAME = "patternbook"

# Derived values
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
ENV_PREFIX = PACKAGE_NAME_PYTHON.upper()
