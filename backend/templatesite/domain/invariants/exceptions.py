class InvariantViolation(Exception):
    """Raised when a write would leave content in an invalid shape."""
