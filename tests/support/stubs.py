"""Shared test stubs for the Spotify Web API."""

from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlparse, parse_qs

from toptracks.clients import spotify as spotify_client

_NO_BODY = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = _NO_BODY, text: str = ""):
        self.status_code = status_code
        self._body = body
        self.text = text
        self.headers: Dict[str, str] = {}

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._body is _NO_BODY:
            raise ValueError("No JSON object could be decoded")
        return self._body


def not_json(status_code: int, text: str = "<html>Bad gateway</html>") -> FakeResponse:
    return FakeResponse(status_code, text=text)


def spotify_error(status_code: int, message: str) -> FakeResponse:
    return FakeResponse(status_code, {"error": {"status": status_code, "message": message}})


def track(name: str, uri: Optional[str] = None) -> Dict[str, Any]:
    return {
        "id": name,
        "name": name.title(),
        "uri": uri or f"spotify:track:{name}",
        "artists": [{"name": "Artist"}],
        "album": {"name": "Album", "images": [{"url": f"http://img/{name}.jpg"}]},
        "duration_ms": 180000,
    }


class FakeSpotify:
    """
    Routes (method, path) to canned responses and records every call.
    Paths are relative to https://api.spotify.com/v1, without a query string.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], FakeResponse] = {}
        self.calls: List[Dict[str, Any]] = []

    def on(self, method: str, path: str, response: FakeResponse) -> "FakeSpotify":
        self.routes[(method.upper(), path)] = response
        return self

    def happy_path(self, uris=("spotify:track:a", "spotify:track:b")) -> "FakeSpotify":
        self.on("GET", "me", FakeResponse(200, {"id": "user-1", "display_name": "User One"}))
        self.on("GET", "me/top/tracks", FakeResponse(200, {
            "items": [track(u.rsplit(":", 1)[-1], u) for u in uris],
        }))
        self.on("POST", "users/user-1/playlists", FakeResponse(201, {"id": "pl-1"}))
        self.on("POST", "playlists/pl-1/tracks", FakeResponse(201, {"snapshot_id": "snap"}))
        return self

    def _path(self, url: str) -> str:
        return url[len(spotify_client.BASE) + 1:] if url.startswith(spotify_client.BASE) else url

    def _respond(self, method, url, **kwargs):
        path = self._path(url)
        self.calls.append({"method": method, "path": path, **kwargs})
        return self.routes.get((method, path), spotify_error(404, "Service not found"))

    def get(self, url, headers=None, params=None, timeout=None):
        return self._respond("GET", url, headers=headers, params=params, timeout=timeout)

    def post(self, url, headers=None, json=None, timeout=None):
        return self._respond("POST", url, headers=headers, json=json, timeout=timeout)

    def calls_to(self, method: str, path: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c["method"] == method and c["path"] == path]


def install_fake_spotify(monkeypatch) -> FakeSpotify:
    fake = FakeSpotify()
    monkeypatch.setattr(spotify_client.requests, "get", fake.get)
    monkeypatch.setattr(spotify_client.requests, "post", fake.post)
    return fake


def login(client, token: str = "tok-123"):
    """Run the login redirect and post back a fragment the way the callback page does."""
    r = client.get("/auth/login")
    state = parse_qs(urlparse(r["Location"]).query)["state"][0]
    return client.post(
        "/auth/token",
        {"fragment": f"access_token={token}&token_type=Bearer&expires_in=3600&state={state}"},
    )
