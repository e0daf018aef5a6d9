"""
Common models shared by the services and the views.

- ApiResponse: the {success, data, error} envelope every endpoint returns
- LetterFilter: the active filter of the letter list and report pages
"""

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

from surat_ui.models.letter import ALL

T = TypeVar("T")

NETWORK_ERROR = "Network error"


@dataclass
class ApiResponse(Generic[T]):
    """
    Response envelope returned by the REST API.

    Attributes:
        success: Whether the request succeeded.
        data: Payload on success (already converted to domain models
              by the service that produced the response).
        error: Error text on failure.
        message: Optional informational message.
        total: Optional total count reported by list endpoints.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None
    total: int | None = None

    @classmethod
    def ok(cls, data: T | None = None, message: str | None = None) -> "ApiResponse[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def failure(cls, error: str | None = None) -> "ApiResponse[T]":
        return cls(success=False, error=error or "Request failed")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "ApiResponse[Any]":
        """Wrap a decoded JSON envelope without converting its data."""
        if not isinstance(payload, Mapping):
            return cls.failure("Invalid response")
        success = bool(payload.get("success"))
        data = payload.get("data")
        return cls(
            success=success,
            data=data,
            error=None if success else (payload.get("error") or "Request failed"),
            message=payload.get("message"),
            total=payload.get("total"),
        )

    @property
    def error_text(self) -> str:
        """Text suitable for a user-visible notification."""
        return self.error or self.message or "Request failed"


@dataclass(frozen=True, slots=True)
class LetterFilter:
    """
    Filter applied to the letter list.

    None means "all". Frozen so that two filters compare by value:
    a change in any field is a filter change.
    """

    search: str = ""
    company_id: int | None = None
    category_id: int | None = None
    year: int | None = None
    month: int | None = None

    @classmethod
    def from_form(
        cls,
        search: str = "",
        company: str = ALL,
        category: str = ALL,
        year: str = ALL,
        month: str = ALL,
    ) -> "LetterFilter":
        """Build a filter from select values where "all" means no restriction."""
        return cls(
            search=(search or "").strip(),
            company_id=_select_value(company),
            category_id=_select_value(category),
            year=_select_value(year),
            month=_select_value(month),
        )

    def to_params(self) -> dict[str, str]:
        """Return the query parameters understood by the REST API."""
        params: dict[str, str] = {}
        if self.search:
            params["search"] = self.search
        if self.company_id is not None:
            params["perusahaan"] = str(self.company_id)
        if self.category_id is not None:
            params["kategori"] = str(self.category_id)
        if self.year is not None:
            params["tahun"] = str(self.year)
        if self.month is not None:
            params["bulan"] = str(self.month)
        return params

    @property
    def is_empty(self) -> bool:
        return not self.to_params()


def _select_value(value: str | int | None) -> int | None:
    if value is None or value == "" or value == ALL:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
