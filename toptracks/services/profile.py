# toptracks/services/profile.py
"""
GET /v1/me for the signed-in user.

Doubles as the credential check: a 401/403 here means the token is no longer
accepted and the caller should forget it.
"""

from __future__ import annotations

from typing import Dict, Any

from ..clients.spotify import sp_get, json_body
from ..errors import SessionExpired, AuthenticationFailed


def fetch_me(access_token: str) -> Dict[str, Any]:
    r = sp_get(access_token, "me")
    if r.status_code in (401, 403):
        raise SessionExpired()

    # any other rejection of the credential check, whatever the body says
    if not r.ok:
        raise AuthenticationFailed()

    return json_body(r)
