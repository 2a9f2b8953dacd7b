"""Exception types raised by dn-check."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import ResultSet


class DNCheckError(Exception):
    """Base class for all dn-check errors."""


class InputError(DNCheckError):
    """Raised when names or TLDs cannot be loaded from user input."""


class ConfigError(DNCheckError):
    """Raised when the configuration file is missing or malformed."""


class OutputError(DNCheckError):
    """Raised when results cannot be written to the output file."""


class AggregatorFinalizedError(DNCheckError):
    """Raised when a verdict is delivered after the results were finalized."""


class IncompleteRunError(DNCheckError):
    """Raised when a run is aborted before every probe completed.

    The verdicts gathered so far are available as ``partial``, a
    ``ResultSet`` whose ``complete`` flag is False.
    """

    def __init__(self, message: str, partial: Optional["ResultSet"] = None):
        super().__init__(message)
        self.partial = partial
