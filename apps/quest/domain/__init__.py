"""Quest Domain Layer."""
