"""
REST client for the hosted realtime database.

Each path maps to `{database_url}/{path}.json`:
    GET    -> read (JSON null when nothing exists)
    DELETE -> remove subtree
    PATCH  -> merge fields into the record

Requests are authenticated one of two ways:
    service account -> OAuth2 access token minted by google-auth, sent as `access_token`
    auth token      -> legacy database secret or Firebase ID token, sent as `auth`

HTTP calls are blocking (requests), so they are pushed to a worker thread
with asyncio.to_thread and awaited by the procedures.
"""

import asyncio
import logging
import threading
from typing import Any

import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2 import service_account

from infrastructure.store_client import IStoreClient, split_path
from infrastructure.store_errors import (
    RecordNotFoundError,
    StoreConnectionError,
    StoreReadError,
    StoreWriteError,
)

logger = logging.getLogger("fury_fm.infrastructure.realtime_database")

# Scopes the realtime database accepts for service-account access tokens
DATABASE_SCOPES = (
    "https://www.googleapis.com/auth/firebase.database",
    "https://www.googleapis.com/auth/userinfo.email",
)


def load_service_account(path: str) -> service_account.Credentials:
    """
    Load service-account credentials scoped for the realtime database.

    Raises:
        StoreConnectionError: If the key file is missing or malformed
    """
    try:
        return service_account.Credentials.from_service_account_file(path, scopes=DATABASE_SCOPES)
    except (OSError, ValueError) as exc:
        raise StoreConnectionError(f"Cannot load service account credentials from {path}: {exc}") from exc


class RealtimeDatabaseClient(IStoreClient):
    """Store client speaking the realtime database REST protocol."""

    def __init__(
        self,
        database_url: str,
        auth_token: str | None = None,
        timeout_seconds: float = 10.0,
        session: requests.Session | None = None,
        credentials: Any | None = None,
    ):
        if not database_url:
            raise ValueError("database_url is required")
        self.database_url = database_url.rstrip("/")
        self.auth_token = auth_token
        self.credentials = credentials
        self.timeout_seconds = timeout_seconds
        self._session = session
        self._owns_session = session is None
        # worker threads share one set of credentials
        self._token_lock = threading.Lock()

    def _url(self, path: str) -> str:
        segments = split_path(path)
        return f"{self.database_url}/{'/'.join(segments)}.json"

    def _access_token(self) -> str:
        with self._token_lock:
            if not self.credentials.valid:
                try:
                    self.credentials.refresh(GoogleAuthRequest(self._session))
                except GoogleAuthError as exc:
                    raise StoreConnectionError(f"Could not obtain an access token: {exc}") from exc
                logger.debug("Refreshed service account access token")
            return self.credentials.token

    def _params(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        params = dict(extra or {})
        if self.credentials is not None:
            params["access_token"] = self._access_token()
        elif self.auth_token:
            params["auth"] = self.auth_token
        return params

    def _request(
        self, method: str, path: str, params: dict[str, str] | None = None, **kwargs
    ) -> requests.Response:
        if self._session is None:
            raise StoreConnectionError("Store client is not connected", path)
        params = self._params(params)
        try:
            return self._session.request(
                method, self._url(path), timeout=self.timeout_seconds, params=params, **kwargs
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            raise StoreConnectionError(f"{method} {path or '/'} failed: {exc}", path) from exc
        except requests.RequestException as exc:
            error_cls = StoreReadError if method == "GET" else StoreWriteError
            raise error_cls(f"{method} {path or '/'} failed: {exc}", path) from exc

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text.strip() or response.reason or ""
        if isinstance(body, dict) and "error" in body:
            return str(body["error"])
        return str(body)

    def _check(self, response: requests.Response, method: str, path: str) -> None:
        if response.ok:
            return
        detail = self._error_detail(response)
        message = f"{method} {path or '/'} returned HTTP {response.status_code}: {detail}"
        if response.status_code == 404:
            raise RecordNotFoundError(message, path)
        if method == "GET":
            raise StoreReadError(message, path)
        raise StoreWriteError(message, path)

    # --- blocking implementations ---

    def _connect_sync(self) -> None:
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
        response = self._request("GET", "", params={"shallow": "true"})
        if response.status_code in (401, 403):
            raise StoreConnectionError(
                f"Store rejected credentials (HTTP {response.status_code}): {self._error_detail(response)}"
            )
        if not response.ok:
            raise StoreConnectionError(
                f"Store unreachable (HTTP {response.status_code}): {self._error_detail(response)}"
            )
        logger.info(f"Connected to realtime database at {self.database_url}")

    def _fetch_sync(self, path: str, shallow: bool) -> Any | None:
        response = self._request("GET", path, params={"shallow": "true"} if shallow else None)
        self._check(response, "GET", path)
        try:
            return response.json()
        except ValueError as exc:
            raise StoreReadError(f"GET {path} returned invalid JSON", path) from exc

    def _delete_sync(self, path: str) -> None:
        response = self._request("DELETE", path)
        self._check(response, "DELETE", path)

    def _patch_sync(self, path: str, fields: dict[str, Any]) -> None:
        response = self._request("PATCH", path, json=fields)
        self._check(response, "PATCH", path)

    # --- IStoreClient ---

    async def connect(self) -> None:
        await asyncio.to_thread(self._connect_sync)

    async def close(self) -> None:
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    async def fetch_subtree(self, path: str, *, shallow: bool = False) -> Any | None:
        value = await asyncio.to_thread(self._fetch_sync, path, shallow)
        # The database never stores empty objects; treat them as absent too
        if value is None or value == {}:
            return None
        return value

    async def delete_subtree(self, path: str) -> None:
        await asyncio.to_thread(self._delete_sync, path)

    async def patch_record(self, path: str, fields: dict[str, Any]) -> None:
        await asyncio.to_thread(self._patch_sync, path, fields)
