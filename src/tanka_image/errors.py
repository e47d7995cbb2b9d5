"""Error types for tanka-image."""


class InvalidConfiguration(ValueError):
    """A style or settings value is out of range or malformed."""
