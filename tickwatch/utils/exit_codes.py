"""Process exit codes for tickwatch."""

# Graceful shutdown on SIGINT/SIGTERM
SUCCESS = 0

# Invalid or missing command-line arguments
USAGE_ERROR = 1
