class InvalidConfiguration(ValueError):
    """Raised when a simulation or its parameters are configured with unusable values."""
