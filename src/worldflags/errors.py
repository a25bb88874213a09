"""Error types raised by worldflags."""


class WorldFlagsError(Exception):
    """Base class for all worldflags errors."""


class DirectoryUnavailable(WorldFlagsError):
    """The assets directory is missing or cannot be listed."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Assets directory unavailable: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class AssetNotFound(WorldFlagsError):
    """No image resource exists for the requested key."""

    def __init__(self, key: str, path=None, reason: str = ""):
        self.key = key
        self.path = path
        self.reason = reason
        message = f"No flag image for '{key}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class NoImageAvailable(WorldFlagsError):
    """Export was requested but there is no image to export."""


class InvalidCoefficient(WorldFlagsError, ValueError):
    """A scale or quality coefficient is outside 0...1."""

    def __init__(self, value, name: str = "coefficient"):
        self.value = value
        super().__init__(f"{name.capitalize()} must be a number in 0...1, got {value!r}")
