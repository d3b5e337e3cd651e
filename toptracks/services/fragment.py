# toptracks/services/fragment.py
'''
Parsing of the URL fragment Spotify appends to the callback address.
 - parse_fragment: "#access_token=...&token_type=Bearer&..." -> flat dict.
 - credential_from_fragment: the access token, if the fragment carries a usable one.
'''

from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import unquote


def parse_fragment(fragment: str) -> Dict[str, Optional[str]]:
    """
    Split on "&", then on the first "=". Values are percent-decoded; "+" is left alone.
    An item without "=" maps its key to None instead of raising.
    """
    if fragment.startswith("#"):
        fragment = fragment[1:]

    parsed: Dict[str, Optional[str]] = {}
    for item in fragment.split("&"):
        if not item:
            continue
        key, sep, value = item.partition("=")
        parsed[key] = unquote(value) if sep else None
    return parsed


def credential_from_fragment(parsed: Dict[str, Optional[str]]) -> Optional[str]:
    token = parsed.get("access_token")
    if isinstance(token, str) and token:
        return token
    return None
