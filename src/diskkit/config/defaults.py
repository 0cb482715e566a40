"""Default configuration values for diskkit.

This module centralizes the hard-coded defaults used by the settings
classes, making them easy to discover and modify.
"""

# Sanitizer
DEFAULT_REPLACE_CONTROL_CHARACTERS = False
DEFAULT_TABLE_FILE = None

# Workspace
DEFAULT_WORKSPACE_ROOT = "."

# Logging
DEFAULT_LOG_VERBOSE = False
DEFAULT_LOG_JSON = False

# YAML section holding disposition rules
SANITIZER_SECTION = "sanitizer"
