"""Exit codes shared by CLI commands."""

IO_EXIT_CODE = 1
VALIDATION_EXIT_CODE = 2
