# toptracks/services/playlists.py
'''
This module provides the two playlist writes used by the top-tracks pipeline.
 - create_playlist: POST a new playlist into the user's collection.
 - add_tracks: POST an ordered list of track URIs to a playlist.
'''

from __future__ import annotations

from typing import Dict, Any, Sequence

from ..clients.spotify import sp_post_json, error_message, json_body
from ..errors import ProviderRequestError

PLAYLIST_DESCRIPTION = "Created by Top Tracks App"


def playlist_name(track_count: int) -> str:
    return f"My Top {track_count} Tracks"


def create_playlist(access_token: str, user_id: str, *, name: str,
                    description: str = PLAYLIST_DESCRIPTION) -> Dict[str, Any]:
    r = sp_post_json(
        access_token,
        f"users/{user_id}/playlists",
        payload={"name": name, "description": description},
    )
    if not r.ok:
        raise ProviderRequestError(
            f"Failed to create playlist: {error_message(r)}", r.status_code
        )
    return json_body(r)


def add_tracks(access_token: str, playlist_id: str, uris: Sequence[str]) -> None:
    """
    Order of `uris` is the order in the playlist. The response body (a snapshot id) is not needed.
    """
    r = sp_post_json(
        access_token,
        f"playlists/{playlist_id}/tracks",
        payload={"uris": list(uris)},
    )
    if not r.ok:
        raise ProviderRequestError(
            f"Failed to add tracks: {error_message(r)}", r.status_code
        )
