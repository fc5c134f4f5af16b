"""Exception hierarchy for caller contract violations.

Data problems (bad paths, missing keys, unconvertible values) never raise;
they resolve to ``None``. These exceptions cover misuse of the API itself.
"""


class DotCoerceError(Exception):
    """Base exception for dotcoerce errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidConverterError(DotCoerceError):
    """Raised when a converter that is not callable is registered."""


class RegistryFrozenError(DotCoerceError):
    """Raised when a frozen registry is modified."""


class MissingDefaultError(DotCoerceError):
    """Raised when ``None`` is passed as an explicit default value."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_CONVERTER = "converter must be callable"
ERR_MSG_REGISTRY_FROZEN = "registry is frozen"
ERR_MSG_MISSING_DEFAULT = "default value cannot be None"
