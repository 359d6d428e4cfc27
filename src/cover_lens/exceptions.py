"""Exception hierarchy for Cover Lens."""


class CoverLensError(Exception):
    """Base class for all Cover Lens errors."""


class ConfigurationError(CoverLensError):
    """Raised at startup when scoring configuration is invalid."""


class LexiconValidationError(ConfigurationError):
    """Raised when the keyword/verb/pattern lexicon fails validation."""


class UnknownRoleError(CoverLensError, ValueError):
    """Raised when a role identifier is not one of the supported roles."""


class InputTooLargeError(CoverLensError):
    """Raised when a letter exceeds the configured size limit under the reject policy."""

    def __init__(self, length: int, max_chars: int):
        self.length = length
        self.max_chars = max_chars
        super().__init__(f"Input is {length} characters, limit is {max_chars}")
