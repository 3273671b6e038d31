"""Quest Service Setup."""
