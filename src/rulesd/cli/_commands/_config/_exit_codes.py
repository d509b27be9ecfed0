"""Exit codes for config commands.

    0 - Success
    1 - Load/parse error
    3 - Validation error (including a missing mandatory setting)
"""

EXIT_SUCCESS: int = 0
"""Command completed successfully."""

EXIT_LOAD_ERROR: int = 1
"""Error loading or parsing a settings file."""

EXIT_VALIDATION_ERROR: int = 3
"""Configuration validation error."""
