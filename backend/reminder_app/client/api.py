"""
HTTP client for the reminder service.

Every authenticated call sends the session token in ``x-auth-token``. A
``401`` means the token is no longer usable: the session is cleared and
``SessionExpiredError`` tells the caller to log in again.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

import httpx

from reminder_app.client.session import SessionContext
from reminder_app.core.logging import logger

TOKEN_HEADER = "x-auth-token"


class ApiError(Exception):
    def __init__(self, status_code: Optional[int], msg: str):
        self.status_code = status_code
        self.msg = msg
        super().__init__(msg)

    @property
    def retryable(self) -> bool:
        return self.status_code is None or self.status_code >= 500


class SessionExpiredError(ApiError):
    pass


class ReminderApiClient:
    def __init__(
        self,
        session: SessionContext,
        base_url: Optional[str] = None,
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        if http is None:
            if not base_url:
                raise ValueError("base_url is required when no http client is given")
            http = httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)
        self.session = session
        self.http = http

    def close(self) -> None:
        self.http.close()

    def _headers(self) -> Dict[str, str]:
        if not self.session.token:
            raise SessionExpiredError(401, "Not logged in")
        return {TOKEN_HEADER: self.session.token}

    def _request(self, method: str, url: str, *, auth: bool = True, **kwargs) -> Any:
        if auth:
            kwargs["headers"] = self._headers()
        try:
            response = self.http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("Request %s %s failed: %s", method, url, exc)
            raise ApiError(None, "Could not reach the server, please try again") from exc

        if response.is_success:
            return response.json()

        msg = _error_message(response)
        if response.status_code == 401 and auth:
            self.session.clear()
            raise SessionExpiredError(401, msg)
        raise ApiError(response.status_code, msg)

    def register(self, email: str, password: str) -> str:
        data = self._request("POST", "/auth/register", auth=False, json={"email": email, "password": password})
        self.session.set(data["token"])
        return data["token"]

    def login(self, email: str, password: str) -> str:
        data = self._request("POST", "/auth/login", auth=False, json={"email": email, "password": password})
        self.session.set(data["token"])
        return data["token"]

    def logout(self) -> None:
        self.session.clear()

    def list_reminders(self, day: Optional[date] = None) -> List[Dict[str, Any]]:
        params = {"day": day.isoformat()} if day else None
        return list(self._request("GET", "/events", params=params))

    def create_reminder(self, title: str, event_time: datetime) -> Dict[str, Any]:
        payload = {"title": title, "eventTime": event_time.isoformat()}
        return self._request("POST", "/events", json=payload)

    def delete_reminder(self, reminder_id: str) -> str:
        return self._request("DELETE", f"/events/{reminder_id}")["msg"]


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or "Something went wrong"
    if isinstance(body, dict) and body.get("msg"):
        return str(body["msg"])
    return "Something went wrong"
