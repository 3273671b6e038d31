"""Quest Infrastructure Layer."""
