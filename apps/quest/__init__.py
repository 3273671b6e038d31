"""Quest evaluation service."""
