"""Analytics error types."""


class InvalidConfigurationError(ValueError):
    """Caller contract violation: bad cycle config, missing exercise id, unparseable date."""
