# toptracks/services/tracks.py
'''
This module provides functionality to fetch and normalize the current user's top tracks.
 - Selection: the (time range, track count) pair chosen on the page.
 - top_tracks: Fetches the raw top-track items for a selection.
 - lite: Normalizes a track for the preview endpoint.
'''

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, List, Mapping

from ..clients.spotify import sp_get, error_message, json_body
from ..errors import InvalidSelection, ProviderRequestError


class TimeRange(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @property
    def api_value(self) -> str:
        return f"{self.value}_term"


TRACK_COUNTS = (10, 20, 50)


@dataclass(frozen=True)
class Selection:
    time_range: TimeRange = TimeRange.LONG
    limit: int = 10

    @classmethod
    def from_params(cls, params: Mapping[str, Any], default: "Selection | None" = None) -> "Selection":
        """
        Build from form/query params. Missing keys fall back to `default`;
        anything outside the offered choices raises InvalidSelection.
        """
        base = default or cls()
        raw_range = params.get("time_range") or base.time_range.value
        raw_limit = params.get("limit") or base.limit
        try:
            time_range = TimeRange(raw_range)
        except ValueError:
            raise InvalidSelection(f"Unknown time range: {raw_range!r}")
        try:
            limit = int(raw_limit)
        except (TypeError, ValueError):
            raise InvalidSelection(f"Track count must be a number: {raw_limit!r}")
        if limit not in TRACK_COUNTS:
            raise InvalidSelection(f"Track count must be one of {TRACK_COUNTS}")
        return cls(time_range=time_range, limit=limit)

    def as_dict(self) -> Dict[str, Any]:
        return {"time_range": self.time_range.value, "limit": self.limit}


def top_tracks(access_token: str, selection: Selection) -> List[Dict[str, Any]]:
    """
    Raw items from /me/top/tracks, in Spotify's ranking order. May be empty.
    """
    r = sp_get(
        access_token,
        "me/top/tracks",
        params={"limit": selection.limit, "time_range": selection.time_range.api_value},
    )
    if not r.ok:
        raise ProviderRequestError(
            f"Failed to get top tracks: {error_message(r)}", r.status_code
        )
    body = json_body(r)
    return (body.get("items") if isinstance(body, dict) else None) or []


def lite(t: Dict[str, Any]) -> Dict[str, Any]:
    imgs = (t.get("album", {}).get("images") or [])
    return {
        "id": t.get("id"),
        "name": t.get("name"),
        "artists": [a["name"] for a in t.get("artists", [])],
        "album": t.get("album", {}).get("name"),
        "image": imgs[0]["url"] if imgs else None,
        "duration_ms": t.get("duration_ms"),
        "uri": t.get("uri"),
    }
