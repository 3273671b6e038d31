"""Quest Presentation Layer."""
