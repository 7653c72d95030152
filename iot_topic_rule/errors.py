class ValidationError(ValueError):
    """Raised when a topic rule input cannot be turned into a valid resource."""
