# portfolio_api/client.py
"""
Python client for the portfolio API.

It plays the part of the browser: the admin password is checked locally
against a known SHA-256 hash, a session token is kept while logged in and
sent as ``Authorization: Bearer <token>`` on every request, and GET
responses are cached per path until a mutation on the same collection
invalidates them.
"""
from typing import Any, Dict, List, Optional

import requests

from portfolio_api.core.logging import logger
from portfolio_api.core.security import generate_session_token, verify_admin_password


class ApiError(Exception):
    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        super().__init__(f"{status_code}: {body}")


class PortfolioClient:
    def __init__(
        self,
        base_url: str = "",
        session=None,
        admin_password_hash: Optional[str] = None,
    ):
        # Any requests-compatible session works, e.g. FastAPI's TestClient
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.admin_password_hash = admin_password_hash
        self.token: Optional[str] = None
        self.cache: Dict[str, Any] = {}

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def login(self, password: str, server_login: bool = False) -> bool:
        """
        Log in as admin. Returns False on a wrong password and leaves the
        current state unchanged.
        """
        if server_login:
            try:
                result = self._request("POST", "/api/auth/login", {"password": password})
            except ApiError as e:
                if e.status_code == 401:
                    return False
                raise
            self.token = result["accessToken"]
            return True

        if not verify_admin_password(password, self.admin_password_hash):
            logger.warning("Admin login failed")
            return False
        self.token = generate_session_token()
        return True

    def logout(self) -> None:
        self.token = None

    def invalidate(self, prefix: str) -> None:
        for path in [path for path in self.cache if path.startswith(prefix)]:
            del self.cache[path]

    def _request(self, method: str, path: str, data: Any = None) -> Any:
        headers = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        response = self.session.request(
            method,
            f"{self.base_url}{path}",
            json=data,
            headers=headers,
        )
        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            raise ApiError(response.status_code, body)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def get(self, path: str) -> Any:
        if path not in self.cache:
            self.cache[path] = self._request("GET", path)
        return self.cache[path]

    def mutate(self, method: str, path: str, data: Any = None, invalidates: Optional[str] = None) -> Any:
        result = self._request(method, path, data)
        self.invalidate(invalidates or path)
        return result

    # Photos

    def list_photos(self) -> List[Dict[str, Any]]:
        return self.get("/api/photos")

    def get_photo(self, photo_id: int) -> Dict[str, Any]:
        return self.get(f"/api/photos/{photo_id}")

    def list_photos_by_category(self, category: str) -> List[Dict[str, Any]]:
        return self.get(f"/api/photos/category/{category}")

    def upload_photo(self, photo: Dict[str, Any]) -> Dict[str, Any]:
        return self.mutate("POST", "/api/photos", photo, invalidates="/api/photos")

    def update_photo(self, photo_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
        return self.mutate("PATCH", f"/api/photos/{photo_id}", changes, invalidates="/api/photos")

    def delete_photo(self, photo_id: int) -> None:
        self.mutate("DELETE", f"/api/photos/{photo_id}", invalidates="/api/photos")

    # Profile

    def get_profile(self) -> Dict[str, Any]:
        return self.get("/api/profile")

    def update_profile(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        return self.mutate("PATCH", "/api/profile", changes)

    # Blog posts

    def list_blog_posts(self) -> List[Dict[str, Any]]:
        return self.get("/api/blog-posts")

    def get_blog_post(self, post_id: int) -> Dict[str, Any]:
        return self.get(f"/api/blog-posts/{post_id}")

    def create_blog_post(self, post: Dict[str, Any]) -> Dict[str, Any]:
        return self.mutate("POST", "/api/blog-posts", post, invalidates="/api/blog-posts")

    def update_blog_post(self, post_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
        return self.mutate("PATCH", f"/api/blog-posts/{post_id}", changes, invalidates="/api/blog-posts")

    def delete_blog_post(self, post_id: int) -> None:
        self.mutate("DELETE", f"/api/blog-posts/{post_id}", invalidates="/api/blog-posts")

    # Portfolio items

    def list_portfolio_items(self) -> List[Dict[str, Any]]:
        return self.get("/api/portfolio-items")

    def save_portfolio_items(self, items: List[Dict[str, Any]]) -> Dict[str, Any]:
        return self.mutate("POST", "/api/portfolio-items", items)

    def add_portfolio_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """Append an item with id max + 1 and save the whole collection."""
        items = list(self.list_portfolio_items())
        new_id = max((existing["id"] for existing in items), default=0) + 1
        return self.save_portfolio_items(items + [{**item, "id": new_id}])
