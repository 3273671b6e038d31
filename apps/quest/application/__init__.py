"""Quest Application Layer."""
