"""Error types raised while generating locale files."""


class GslocError(Exception):
    """Base class for every error gsloc reports to the user."""


class ConfigValidationError(GslocError):
    """Raised when the config file is missing, unreadable or incomplete."""


class DataSourceError(GslocError):
    """Raised when the sheet cannot be fetched or holds no data."""


class MalformedKeyCell(GslocError):
    """Raised when a key cell holds something other than a string."""

    def __init__(self, row: int, value):
        self.row = row
        self.value = value
        super().__init__(
            f"row {row}: key cell must be a string, got {type(value).__name__} {value!r}"
        )


class KeyPathConflict(GslocError):
    """Raised when a dotted key collides with an already nested or leaf value."""

    def __init__(self, key: str, path: str, reason: str):
        self.key = key
        self.path = path
        super().__init__(f"key '{key}' conflicts at '{path}': {reason}")


class OutputWriteError(GslocError):
    """Raised when the output directory or a locale file cannot be written."""
