"""
Exit codes for pls.

Semantic exit codes so scripts (and the shell hook) can tell what happened.
"""

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Store file could not be read or written
ERROR_PERSISTENCE = 3

# Network or weather provider error
ERROR_NETWORK = 4
