# toptracks/services/auth.py
"""
Auth/service layer for Spotify OAuth (implicit grant).
- Builds the authorize URL the browser is sent to.
- Provides helpers to generate/validate OAuth `state` for CSRF protection.

The access token comes back in the callback URL fragment; see services/fragment.py.
"""

from __future__ import annotations

import secrets
from typing import Iterable, Optional
from urllib.parse import urlencode, quote

from ..clients.spotify import AUTHORIZE_URL

SCOPES = [
    "user-top-read",
    "playlist-modify-public",
    "playlist-modify-private",
    "user-read-private",
    "user-read-email",
]

# ---- Authorize URL ----------------------------------------------------------

def build_auth_url(
    client_id: str,
    redirect_uri: str,
    scopes: Iterable[str],
    *,
    show_dialog: bool = False,
    state: Optional[str] = None,
) -> str:
    """
    Deterministic authorize URL for response_type=token. No network access.
    Scopes are space-joined and encoded as %20.
    """
    params = {
        "client_id": client_id,
        "response_type": "token",
        "redirect_uri": redirect_uri,
        "scope": " ".join(scopes),
    }
    if show_dialog:
        params["show_dialog"] = "true"
    if state:
        params["state"] = state
    return f"{AUTHORIZE_URL}?{urlencode(params, quote_via=quote)}"

# ---- OAuth state helpers (CSRF protection) ---------------------------------

_STATE_SESSION_KEY = "oauth_state"

def generate_oauth_state(length: int = 24) -> str:
    """
    Create a cryptographically-strong random state string to send to Spotify.
    """
    return secrets.token_urlsafe(length)

def save_oauth_state(session, state: str) -> None:
    session[_STATE_SESSION_KEY] = state

def validate_oauth_state(session, received_state: str | None) -> bool:
    """
    Compare received state to what we saved. Pop after checking to avoid reuse.
    Returns True if valid, else False.
    """
    expected = session.pop(_STATE_SESSION_KEY, None)
    return bool(expected) and (received_state == expected)
