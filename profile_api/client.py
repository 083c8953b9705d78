"""
HTTP client for the API, mirroring the frontend's generated bindings.

Error responses are returned, not raised: a 401 from a protected route
called without a token is an expected result in the demo.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

DEFAULT_API_URL = "http://localhost:8787"


def create_auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@dataclass
class ApiResult:
    status_code: int
    data: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def error(self) -> Optional[str]:
        if self.ok or not isinstance(self.data, dict):
            return None
        return self.data.get("error")


class ApiClient:
    def __init__(self, base_url: Optional[str] = None, http: Optional[httpx.Client] = None):
        self.base_url = base_url or os.getenv("API_URL", DEFAULT_API_URL)
        self._owns_http = http is None
        self.http = http or httpx.Client(base_url=self.base_url)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> ApiResult:
        headers = create_auth_headers(token) if token else {}
        response = self.http.request(method, path, headers=headers, json=json)
        try:
            data = response.json()
        except ValueError:
            data = {"error": response.text}
        return ApiResult(status_code=response.status_code, data=data)

    # Public
    def hello(self) -> ApiResult:
        return self._request("GET", "/api/hello")

    def greet(self, name: str) -> ApiResult:
        return self._request("POST", "/api/greet", json={"name": name})

    # Auth
    def signup(self, email: str, password: str) -> ApiResult:
        return self._request("POST", "/api/auth/signup", json={"email": email, "password": password})

    def login(self, email: str, password: str) -> ApiResult:
        return self._request("POST", "/api/auth/login", json={"email": email, "password": password})

    def refresh(self, refresh_token: str) -> ApiResult:
        return self._request("POST", "/api/auth/refresh", json={"refresh_token": refresh_token})

    def logout(self, token: Optional[str]) -> ApiResult:
        return self._request("POST", "/api/auth/logout", token=token)

    # Protected (token may be omitted to exercise the 401 path)
    def me(self, token: Optional[str] = None) -> ApiResult:
        return self._request("GET", "/api/protected/me", token=token)

    def protected_data(self, token: Optional[str] = None) -> ApiResult:
        return self._request("GET", "/api/protected/data", token=token)

    def get_profile(self, token: Optional[str] = None) -> ApiResult:
        return self._request("GET", "/api/profile", token=token)

    def update_profile(
        self,
        token: Optional[str] = None,
        name: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> ApiResult:
        """Only the arguments that are passed are sent, so the others stay unchanged."""
        body = {}
        if name is not None:
            body["name"] = name
        if bio is not None:
            body["bio"] = bio
        return self._request("PUT", "/api/profile", token=token, json=body)
