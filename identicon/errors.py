"""Exception types raised by the identicon pipeline."""


class IdenticonError(Exception):
    """Base class for identicon errors."""


class InsufficientDigest(IdenticonError, ValueError):
    """Raised when a digest is too short to yield an RGB color."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Digest has {length} bytes, at least 3 are required")
        self.length = length
