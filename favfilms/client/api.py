# favfilms/client/api.py
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

import httpx

from favfilms.client.session import SessionCache
from favfilms.common.logging import get_logger

logger = get_logger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class FavFilmsClient:
    """
    Thin synchronous client for the FavFilms API.

    Attaches the cached bearer token to every request. Any 401 clears the
    cached token (forcing a fresh login) before ApiError is raised. No
    retries; a sent request cannot be cancelled.

    Pass `http=` to reuse an existing httpx.Client (e.g. a Starlette TestClient).
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        *,
        http: Optional[httpx.Client] = None,
        session: Optional[SessionCache] = None,
        timeout: float = 10.0,
    ) -> None:
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self.session = session or SessionCache()

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "FavFilmsClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- transport ----

    def _request(self, method: str, path: str, *, json: Any = None, params: Optional[Mapping[str, Any]] = None) -> Any:
        headers = {"Content-Type": "application/json", **self.session.auth_header()}
        resp = self.http.request(method, path, json=json, params=params, headers=headers)
        logger.debug("%s %s -> %s", method, path, resp.status_code)

        if resp.status_code == httpx.codes.UNAUTHORIZED:
            self.session.logout()
            raise ApiError(resp.status_code, _error_message(resp) or "Unauthorized. Please log in again.")

        if not resp.is_success:
            raise ApiError(resp.status_code, _error_message(resp) or "Request failed")

        return resp.json()

    # ---- auth ----

    def signup(self, name: str, email: str, password: str) -> dict:
        data = self._request("POST", "/auth/signup", json={"name": name, "email": email, "password": password})
        self.session.store(data.get("token"))
        return data

    def login(self, email: str, password: str) -> dict:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.session.store(data.get("token"))
        return data

    def logout(self) -> None:
        self.session.logout()

    def get_current_user(self) -> Optional[dict]:
        return self.session.get_current_user()

    # ---- films ----

    def get_entries(self, page: int = 1) -> dict:
        return self._request("GET", "/films", params={"page": page})

    def get_entry(self, entry_id: int) -> dict:
        return self._request("GET", f"/films/{entry_id}")

    def create_entry(self, fields: Mapping[str, Any]) -> dict:
        return self._request("POST", "/films", json=dict(fields))

    def update_entry(self, entry_id: int, fields: Mapping[str, Any]) -> dict:
        return self._request("PUT", f"/films/{entry_id}", json=dict(fields))

    def delete_entry(self, entry_id: int) -> dict:
        return self._request("DELETE", f"/films/{entry_id}")


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict):
        return str(body.get("error") or body.get("message") or "")
    return resp.text


class EntryLoader:
    """
    "Load more" pagination state. Page 1 replaces the list, later pages
    append. A plain `is_loading` flag keeps page fetches from overlapping.
    On error the state is left as it was and the ApiError propagates.
    """

    def __init__(self, client: FavFilmsClient) -> None:
        self.client = client
        self.entries: List[dict] = []
        self.page = 1
        self.has_more = True
        self.is_loading = False

    def load(self, page_num: int) -> bool:
        if self.is_loading:
            return False
        self.is_loading = True
        try:
            result = self.client.get_entries(page_num)
            if page_num == 1:
                self.entries = list(result["data"])
            else:
                self.entries = self.entries + list(result["data"])
            self.has_more = bool(result["hasMore"])
            self.page = page_num
            return True
        finally:
            self.is_loading = False

    def refresh(self) -> bool:
        return self.load(1)

    def load_more(self) -> bool:
        if not self.has_more:
            return False
        return self.load(self.page + 1)


def filter_entries(entries: Iterable[Mapping[str, Any]], query: str = "", entry_type: str = "") -> List[Mapping[str, Any]]:
    """Case-insensitive title/director search plus an optional exact type filter."""
    q = (query or "").lower()
    t = (entry_type or "").lower()
    out = []
    for e in entries:
        matches_search = q in str(e.get("title", "")).lower() or q in str(e.get("director", "")).lower()
        matches_type = not t or str(e.get("type", "")).lower() == t
        if matches_search and matches_type:
            out.append(e)
    return out
