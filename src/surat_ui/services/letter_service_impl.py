"""
REST API implementation of LetterService.

This module provides the production letter service that:
- Sends requests to the letter numbering REST API over httpx
- Authorizes requests with the bearer token from the Session
- Reads response envelopes through benedict for tolerant nested access
- Caches lookup lists (companies, categories, years) on disk

Every endpoint answers with an envelope:

    {"success": true, "data": ..., "message": "..."}
    {"success": false, "error": "..."}

Transport failures (timeouts, refused connections, non-JSON bodies)
never escape this module; they become a failed ApiResponse with the
"Network error" text the views show to the user.
"""

from typing import Any, Callable, List

import httpx
from benedict import benedict

from surat_ui import config
from surat_ui.lib import caches, clients, logs, objects, paths
from surat_ui.models.common import NETWORK_ERROR, ApiResponse, LetterFilter
from surat_ui.models.letter import (
    COMPANY_ACTIVE,
    Category,
    Company,
    CountRow,
    DashboardStats,
    Letter,
    LetterDraft,
    ReportSummary,
    User,
    deserialize_category,
    deserialize_company,
    deserialize_letter,
    deserialize_user,
    serialize_category,
    serialize_company,
)
from surat_ui.services.letter_service import (
    LetterService,
    catalog_entry_error,
    password_change_error,
)
from surat_ui.session import Session

LOG = logs.logger(__file__)


def _parse_report(b: benedict) -> ReportSummary:
    """
    Parse the /laporan payload into a ReportSummary.

    Uses benedict for safe nested key access (dot notation) so a
    missing summary block yields zero counts instead of a KeyError.

    Args:
        b: Benedict dict wrapping the report's data object.

    Returns:
        Fully populated ReportSummary dataclass.
    """
    return ReportSummary(
        letters=[deserialize_letter(item) for item in b.get("surat") or []],
        total=int(b.get("summary.total") or 0),
        by_company=_parse_count_rows(b.get("summary.byPerusahaan"), "nama"),
        by_category=_parse_count_rows(b.get("summary.byKategori"), "nama"),
    )


def _parse_count_rows(rows, name_key: str) -> List[CountRow]:
    return [
        CountRow(name=str(row.get(name_key) or ""), count=int(row.get("jumlah") or 0))
        for row in rows or []
    ]


def _parse_stats(b: benedict) -> DashboardStats:
    """
    Parse the /surat/stats payload into DashboardStats.

    Args:
        b: Benedict dict wrapping the stats data object.

    Returns:
        DashboardStats with missing figures defaulting to zero.
    """
    return DashboardStats(
        total_letters=int(b.get("totalSurat") or 0),
        letters_this_month=int(b.get("suratBulanIni") or 0),
        total_companies=int(b.get("totalPerusahaan") or 0),
        monthly=_parse_count_rows(b.get("statistik12Bulan"), "name"),
        by_company=_parse_count_rows(b.get("suratPerPerusahaan"), "nama"),
        recent=[deserialize_letter(item) for item in b.get("suratTerbaru") or []],
    )


class LetterServiceImpl(LetterService):
    """
    Production letter service backed by the REST API.

    Optional Environment Variables:
        SURAT_UI_API_URL: API root (default http://localhost:5000/api)
        SURAT_UI_CACHE_TTL: Lookup cache TTL in seconds

    Attributes:
        session: Session providing the bearer token.
    """

    # Lookup cache shared by every instance in the process; opened lazily
    _DISK_CACHE: caches.DiskCache | None = None

    @classmethod
    def shared_cache(cls) -> caches.DiskCache:
        """Return the process-wide lookup cache, opening it on first use."""
        if cls._DISK_CACHE is None:
            cls._DISK_CACHE = caches.DiskCache(paths.cache_dir())
        return cls._DISK_CACHE

    def __init__(
        self,
        session: Session | None = None,
        client: httpx.Client | None = None,
        cache: caches.DiskCache | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            session: Session used to authorize requests.
            client: httpx client; defaults to the shared API client.
            cache: Lookup cache; defaults to the shared DiskCache in the
                   temp directory when SURAT_UI_CACHE is enabled.

        Raises:
            AssertionError: If no client is given and SURAT_UI_API_URL is empty.
        """
        super().__init__(session)
        if client is None:
            assert config.API_URL, "SURAT_UI_API_URL is not set"
            client = clients.api_client()
        self._client = client
        if cache is None and config.CACHE_ENABLED:
            cache = self.shared_cache()
        self._cache = cache

    # Authentication

    def login(self, email: str, password: str) -> ApiResponse[User]:
        payload = self._send("POST", "/auth/login", json={"email": email, "password": password})
        if payload is None:
            return ApiResponse.failure(NETWORK_ERROR)
        b = benedict(payload, keyattr_dynamic=True)
        if not b.get("success") or not b.get("token") or not b.get("user"):
            return ApiResponse.failure(b.get("error") or "Login failed")
        user = deserialize_user(b.get("user"))
        self.session.start(b.get("token"), user)
        return ApiResponse.ok(user)

    def logout(self) -> ApiResponse[None]:
        try:
            if self.session.is_authenticated:
                response = self._request("POST", "/auth/logout")
                if not response.success:
                    LOG.warning("Logout request failed: %s", response.error_text)
        finally:
            self.session.end()
        return ApiResponse.ok(message="Logout berhasil")

    def profile(self) -> ApiResponse[User]:
        response = self._convert(self._request("GET", "/auth/profile"), deserialize_user)
        if response.success:
            self.session.update_user(response.data)
        return response

    def update_profile(self, name: str, email: str) -> ApiResponse[User]:
        name, email = (name or "").strip(), (email or "").strip()
        if not name or not email:
            return ApiResponse.failure("Nama dan email wajib diisi")
        response = self._convert(
            self._request("PUT", "/auth/profile", json={"name": name, "email": email}),
            deserialize_user,
        )
        if response.success:
            self.session.update_user(response.data)
            LOG.info("Profile updated for user %s", response.data.id)
        return response

    def change_password(
        self, current_password: str, new_password: str, confirm_password: str
    ) -> ApiResponse[None]:
        error = password_change_error(current_password, new_password, confirm_password)
        if error:
            return ApiResponse.failure(error)
        response = self._request(
            "PUT",
            "/auth/change-password",
            json={
                "currentPassword": current_password,
                "newPassword": new_password,
                "confirmPassword": confirm_password,
            },
        )
        if not response.success:
            return response
        return ApiResponse.ok(message=response.message)

    # Letters

    def list_letters(self, letter_filter: LetterFilter | None = None) -> ApiResponse[List[Letter]]:
        params = (letter_filter or LetterFilter()).to_params()
        LOG.info("Listing letters with params: %s", params)
        response = self._request("GET", "/surat", params=params)
        return self._convert_list(response, deserialize_letter)

    def get_letter(self, letter_id: int) -> ApiResponse[Letter]:
        response = self._request("GET", f"/surat/{letter_id}")
        return self._convert(response, deserialize_letter)

    def create_letter(self, draft: LetterDraft) -> ApiResponse[Letter]:
        if draft.missing_fields():
            return ApiResponse.failure("Semua field wajib diisi")
        response = self._request("POST", "/surat", json=draft.to_payload())
        if response.success:
            # A new letter can introduce a new year
            self.invalidate_lookups()
        return self._convert(response, deserialize_letter)

    def update_letter(self, letter_id: int, subject: str, recipient: str) -> ApiResponse[Letter]:
        response = self._request(
            "PUT",
            f"/surat/{letter_id}",
            json={"perihal": subject.strip(), "tujuan": recipient.strip()},
        )
        if response.success and not isinstance(response.data, dict):
            # Some API versions answer updates without echoing the record
            return ApiResponse.ok(message=response.message)
        return self._convert(response, deserialize_letter)

    def delete_letter(self, letter_id: int) -> ApiResponse[None]:
        response = self._request("DELETE", f"/surat/{letter_id}")
        if response.success:
            self.invalidate_lookups()
            return ApiResponse.ok(message=response.message)
        return response

    def available_years(self) -> ApiResponse[List[int]]:
        response = self._cached("GET", "/surat/years")
        return self._convert_list(response, int)

    def get_stats(self) -> ApiResponse[DashboardStats]:
        response = self._request("GET", "/surat/stats")
        if not response.success:
            return response
        data = response.data if isinstance(response.data, dict) else {}
        return ApiResponse.ok(_parse_stats(benedict(data, keyattr_dynamic=True)))

    # Lookups

    def list_companies(self, active_only: bool = False) -> ApiResponse[List[Company]]:
        params = {"active": "true"} if active_only else None
        response = self._convert_list(
            self._cached("GET", "/perusahaan", params=params), deserialize_company
        )
        if response.success:
            response.data = self.visible_companies(response.data)
        return response

    def create_company(
        self, name: str, code: str, status: str = COMPANY_ACTIVE
    ) -> ApiResponse[Company]:
        company = Company(id=0, name=name.strip(), code=code.strip().upper(), status=status)
        return self._write_catalog(
            "POST",
            "/perusahaan",
            error=catalog_entry_error(name, code, status),
            payload=serialize_company(company),
            parse=deserialize_company,
        )

    def update_company(
        self, company_id: int, name: str, code: str, status: str = COMPANY_ACTIVE
    ) -> ApiResponse[Company]:
        company = Company(id=company_id, name=name.strip(), code=code.strip().upper(), status=status)
        return self._write_catalog(
            "PUT",
            f"/perusahaan/{company_id}",
            error=catalog_entry_error(name, code, status),
            payload=serialize_company(company),
            parse=deserialize_company,
        )

    def delete_company(self, company_id: int) -> ApiResponse[None]:
        return self._write_catalog("DELETE", f"/perusahaan/{company_id}")

    def list_categories(self) -> ApiResponse[List[Category]]:
        response = self._cached("GET", "/kategori")
        return self._convert_list(response, deserialize_category)

    def create_category(self, name: str, code: str) -> ApiResponse[Category]:
        category = Category(id=0, name=name.strip(), code=code.strip().upper())
        return self._write_catalog(
            "POST",
            "/kategori",
            error=catalog_entry_error(name, code),
            payload=serialize_category(category),
            parse=deserialize_category,
        )

    def update_category(self, category_id: int, name: str, code: str) -> ApiResponse[Category]:
        category = Category(id=category_id, name=name.strip(), code=code.strip().upper())
        return self._write_catalog(
            "PUT",
            f"/kategori/{category_id}",
            error=catalog_entry_error(name, code),
            payload=serialize_category(category),
            parse=deserialize_category,
        )

    def delete_category(self, category_id: int) -> ApiResponse[None]:
        return self._write_catalog("DELETE", f"/kategori/{category_id}")

    def _write_catalog(
        self,
        method: str,
        path: str,
        error: str | None = None,
        payload: dict | None = None,
        parse: Callable[[Any], Any] | None = None,
    ) -> ApiResponse[Any]:
        """
        Send a company or category change and drop the cached lookups.

        Args:
            method: POST, PUT or DELETE.
            path: Endpoint path.
            error: Validation error found before sending; nothing is sent.
            payload: JSON body for POST and PUT.
            parse: Converts the echoed record; None for deletes.
        """
        if error:
            return ApiResponse.failure(error)
        response = self._request(method, path, json=payload)
        if not response.success:
            return response
        self.invalidate_lookups()
        LOG.info("%s %s succeeded", method, path)
        if parse is None or not isinstance(response.data, dict):
            return ApiResponse.ok(message=response.message)
        return self._convert(response, parse)

    # Reports

    def get_report(self, letter_filter: LetterFilter | None = None) -> ApiResponse[ReportSummary]:
        params = (letter_filter or LetterFilter()).to_params()
        params.pop("search", None)
        response = self._request("GET", "/laporan", params=params)
        if not response.success:
            return response
        data = response.data if isinstance(response.data, dict) else {}
        return ApiResponse.ok(_parse_report(benedict(data, keyattr_dynamic=True)))

    def invalidate_lookups(self) -> None:
        """Drop cached companies, categories and years."""
        if self._cache is not None:
            self._cache.clear()

    def _cached(
        self, method: str, path: str, params: dict | None = None
    ) -> ApiResponse[Any]:
        """
        Perform a lookup request through the disk cache.

        Only successful envelopes are cached. The key includes the API
        root and the session user so admins never see another scope.
        """
        if self._cache is None:
            return self._request(method, path, params=params)
        user = self.session.user
        key = objects.cache_key(
            str(self._client.base_url), method, path, params, user.id if user else None
        )
        return self._cache.get_or_load(
            key,
            lambda: self._request(method, path, params=params),
            expire=config.CACHE_TTL,
            keep=lambda response: response.success,
        )

    def _request(
        self,
        method: str,
        path: str,
        params: dict | None = None,
        json: dict | None = None,
    ) -> ApiResponse[Any]:
        """Send a request and wrap its envelope without converting data."""
        payload = self._send(method, path, params=params, json=json)
        if payload is None:
            return ApiResponse.failure(NETWORK_ERROR)
        return ApiResponse.from_payload(payload)

    def _send(
        self,
        method: str,
        path: str,
        params: dict | None = None,
        json: dict | None = None,
    ) -> dict | None:
        """
        Send a request and return the decoded JSON body.

        Returns:
            The decoded body, or None when the request failed in
            transport or the body was not a JSON object.
        """
        try:
            response = self._client.request(
                method,
                path,
                params=params,
                json=json,
                headers=self.session.auth_headers(),
            )
        except httpx.HTTPError as e:
            LOG.error("%s %s failed: %s", method, path, e, exc_info=True)
            return None

        if response.status_code == httpx.codes.UNAUTHORIZED and self.session.is_authenticated:
            LOG.warning("%s %s rejected the session token", method, path)
            self.session.end()

        try:
            payload = response.json()
        except ValueError:
            LOG.error(
                "%s %s returned non-JSON body (status %s)", method, path, response.status_code
            )
            return None
        if not isinstance(payload, dict):
            LOG.error("%s %s returned unexpected payload: %s", method, path, objects.to_json(payload))
            return None
        return payload

    @staticmethod
    def _convert(response: ApiResponse[Any], parse: Callable[[Any], Any]) -> ApiResponse[Any]:
        if not response.success:
            return response
        if not isinstance(response.data, dict):
            return ApiResponse.failure("Invalid response")
        converted = ApiResponse.ok(parse(response.data), message=response.message)
        converted.total = response.total
        return converted

    @staticmethod
    def _convert_list(
        response: ApiResponse[Any], parse: Callable[[Any], Any]
    ) -> ApiResponse[Any]:
        if not response.success:
            return response
        if not isinstance(response.data, list):
            return ApiResponse.failure("Invalid response")
        converted = ApiResponse.ok([parse(item) for item in response.data], message=response.message)
        converted.total = response.total
        return converted
