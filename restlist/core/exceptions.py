"""Exception classes for restaurant lists."""


class RestlistError(Exception):
    """Base exception for restaurant list errors."""

    pass


class ValidationError(RestlistError, ValueError):
    """Raised when a restaurant, list or setting fails validation."""

    def __init__(self, field: str, message: str):
        """Initialize with field and message."""
        self.field = field
        self.message = message
        super().__init__(f"Validation error for {field}: {message}")


class ListIndexError(RestlistError, IndexError):
    """Raised when an index does not point into a sequence."""

    def __init__(self, index: int, size: int, what: str = "list"):
        """Initialize with the offending index and sequence size."""
        self.index = index
        self.size = size
        super().__init__(f"{what} index {index} out of range (size {size})")


class InvalidMergeError(RestlistError, ValueError):
    """Raised when merge preconditions are violated."""

    def __init__(self, violations: list[str]):
        """Initialize with the list of violated preconditions."""
        self.violations = list(violations)
        super().__init__("Invalid merge: " + "; ".join(self.violations))


class NoSelectionError(RestlistError, LookupError):
    """Raised when an action requires a selected list and none is selected."""

    def __init__(self, action: str):
        """Initialize with the attempted action."""
        self.action = action
        super().__init__(f"Cannot {action}: no list is selected")


class RegistryError(RestlistError):
    """Raised when a list cannot be registered."""

    pass


class ConfigError(RestlistError, ValueError):
    """Raised when configuration cannot be loaded."""

    def __init__(self, source: str, details: str = ""):
        """Initialize with config source and details."""
        self.source = source
        message = f"Invalid configuration in {source}"
        if details:
            message += f": {details}"
        super().__init__(message)
