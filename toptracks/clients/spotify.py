# toptracks/clients/spotify.py
'''
Client layer for Spotify API interactions.
 - Provides functions to perform GET and JSON POST requests with the bearer credential.
 - Extracts the provider's error message from failed responses.
 - Centralizes requests to the Spotify API, making it easier to manage and modify.
'''

import requests
from django.conf import settings

from ..errors import ProviderRequestError

BASE = "https://api.spotify.com/v1"
AUTHORIZE_URL = "https://accounts.spotify.com/authorize"

UNKNOWN_ERROR = "Unknown error"
UNEXPECTED_RESPONSE = "Unexpected response from Spotify"


def _to_url(path_or_url: str) -> str:
    return path_or_url if path_or_url.startswith("http") else f"{BASE}/{path_or_url.lstrip('/')}"


def _timeout():
    # None means no timeout, same as a browser fetch
    return getattr(settings, "SPOTIFY_HTTP_TIMEOUT", None)


def sp_get(access_token: str, path_or_url: str, *, params=None):
    return requests.get(
        _to_url(path_or_url),
        headers={"Authorization": f"Bearer {access_token}"},
        params=params or {},
        timeout=_timeout(),
    )


def sp_post_json(access_token: str, path_or_url: str, *, payload: dict):
    return requests.post(
        _to_url(path_or_url),
        headers={
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        },
        json=payload,
        timeout=_timeout(),
    )


def json_body(r):
    """
    Parsed JSON of a successful response; a body that is not JSON is reported
    as an unexpected response rather than a transport failure.
    """
    try:
        return r.json()
    except ValueError:
        raise ProviderRequestError(UNEXPECTED_RESPONSE, r.status_code)


def error_message(r, default: str = UNKNOWN_ERROR) -> str:
    """
    Spotify wraps failures as {"error": {"status": ..., "message": ...}}.
    Returns that message, or `default` when the body is not JSON or has no message.
    """
    try:
        body = r.json()
    except ValueError:
        return default
    err = body.get("error") if isinstance(body, dict) else None
    if isinstance(err, dict) and err.get("message"):
        return err["message"]
    # the accounts service uses {"error": "...", "error_description": "..."}
    if isinstance(body, dict) and body.get("error_description"):
        return body["error_description"]
    return default
