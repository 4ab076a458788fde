"""HTTP error hierarchy for the Mondo App Connect API.

Every failed request surfaces as one of these:
- HttpError: transport or API failure (status code, type, message)
- ValidationError: HttpError carrying a per-field error map

Schema failures raised while parsing a response are pydantic's own
ValidationError and are not wrapped here.
"""

from typing import Dict, Optional

from pydantic import ValidationError as SchemaValidationError

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred. Please try the operation again."
UNKNOWN_ERROR_TYPE = "Unknown"
DEFAULT_STATUS_CODE = 500

AUTHORIZATION_STATUS_CODES = (401, 403)


class HttpError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str = UNKNOWN_ERROR_MESSAGE,
        status_code: int = DEFAULT_STATUS_CODE,
        type: str = UNKNOWN_ERROR_TYPE,
    ):
        self.message = message
        self.status_code = status_code
        self.type = type
        super().__init__(message)

    @property
    def is_authorization_error(self) -> bool:
        """True for 401/403 responses."""
        return self.status_code in AUTHORIZATION_STATUS_CODES

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"status_code={self.status_code}, type={self.type!r})"
        )


class ValidationError(HttpError):
    """Request rejected with field-level errors."""

    def __init__(
        self,
        message: str = UNKNOWN_ERROR_MESSAGE,
        status_code: int = DEFAULT_STATUS_CODE,
        type: str = UNKNOWN_ERROR_TYPE,
        fields: Optional[Dict[str, str]] = None,
    ):
        super().__init__(message, status_code, type)
        self.fields: Dict[str, str] = dict(fields) if fields else {}

    @classmethod
    def from_schema_error(
        cls,
        error: SchemaValidationError,
        status_code: int = 400,
        type: str = "validation",
    ) -> "ValidationError":
        """Convert a pydantic ValidationError into a field map.

        Locations are joined with dots, e.g. ``source.app``. When a location
        reports several problems the first one wins.
        """
        fields: Dict[str, str] = {}
        for item in error.errors():
            location = ".".join(str(part) for part in item.get("loc", ())) or "__root__"
            fields.setdefault(location, item.get("msg", "Invalid value"))
        return cls(
            f"Invalid {error.title}",
            status_code=status_code,
            type=type,
            fields=fields,
        )
