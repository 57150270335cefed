"""Shared fixtures: settings factory and a local fake service desk."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict, List, Optional

import pytest

from servicedesk_auth.models import AppSettings


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: Any
    body: bytes

    def json(self) -> Dict[str, Any]:
        return json.loads(self.body.decode("utf-8"))


@dataclass
class FakeServiceDesk:
    url: str = ""
    status: int = 200
    body: bytes = b"{}"
    content_type: str = "application/json"
    set_cookies: List[str] = field(default_factory=list)
    requests: List[RecordedRequest] = field(default_factory=list)

    def respond(
        self,
        status: int = 200,
        body: Any = None,
        content_type: Optional[str] = None,
        cookies: Optional[List[str]] = None,
    ) -> None:
        self.status = status
        if isinstance(body, (dict, list)):
            self.body = json.dumps(body).encode("utf-8")
            self.content_type = content_type or "application/json"
        else:
            self.body = (body or "").encode("utf-8")
            self.content_type = content_type or "text/plain; charset=utf-8"
        self.set_cookies = list(cookies or [])


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        self._handle("GET")

    def do_POST(self) -> None:
        self._handle("POST")

    def _handle(self, method: str) -> None:
        fake: FakeServiceDesk = self.server.fake  # type: ignore[attr-defined]
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        fake.requests.append(RecordedRequest(method, self.path, self.headers, body))

        self.send_response(fake.status)
        self.send_header("Content-Type", fake.content_type)
        self.send_header("Content-Length", str(len(fake.body)))
        for cookie in fake.set_cookies:
            self.send_header("Set-Cookie", cookie)
        self.end_headers()
        self.wfile.write(fake.body)

    def log_message(self, format, *args) -> None:
        pass


@pytest.fixture
def service_desk():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    fake = FakeServiceDesk(url=f"http://127.0.0.1:{server.server_port}")
    server.fake = fake  # type: ignore[attr-defined]
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield fake
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


def settings_payload(
    sandbox_url: str = "https://sandbox.example.com",
    production_url: str = "https://prod.example.com",
    environment: str = "Sandbox",
) -> Dict[str, Any]:
    return {
        "Environment": environment,
        "ServiceDesk": {
            "SandboxUrl": sandbox_url,
            "ProductionUrl": production_url,
            "Username": "ana.agent",
            "Password": "s3cret",
            "UserID": "0042",
        },
        "TopDesk": {
            "BaseUrl": "https://topdesk.example.com",
            "Username": "td-user",
            "Password": "td-pass",
        },
    }


@pytest.fixture
def make_settings():
    def _make(**kwargs: Any) -> AppSettings:
        return AppSettings.model_validate(settings_payload(**kwargs))

    return _make


def login_body(info: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"user": {"info": info}}


def user_info(group_id: Any = 42, first_name: Any = "Ana", email: Any = "ana@x.com") -> List[Dict[str, Any]]:
    info: List[Dict[str, Any]] = []
    if group_id is not None:
        info.append({"key": "user_groups", "value": [{"id": group_id, "name": "N1"}], "valueCaption": None})
    if first_name is not None:
        info.append({"key": "first_name", "value": first_name, "valueCaption": first_name})
    if email is not None:
        info.append({"key": "email_address", "value": email, "valueCaption": None})
    return info
