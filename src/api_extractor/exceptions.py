"""Exception hierarchy for api-extractor.

All exceptions inherit from :class:`ExtractorError`. The CLI catches it,
prints the message in red and exits with ``exit_code``. The tree builder
itself never raises these; they come from the configuration, retrieval
and persistence steps around it.
"""


class ExtractorError(Exception):
    """Base exception for all api-extractor errors."""

    exit_code: int = 1

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(ExtractorError):
    """Raised when the config file is missing, unreadable or invalid."""


class FetchError(ExtractorError):
    """Raised when the API document cannot be retrieved or parsed."""


class OutputError(ExtractorError):
    """Raised when the result cannot be written to disk."""
