# toptracks/services/pipeline.py
"""
Top-tracks playlist pipeline.

Four calls, strictly in order, each gated on the previous one:

    FetchingProfile -> FetchingTopTracks -> CreatingPlaylist -> AddingTracks -> Done

The coordinator stops at the first SpotifyError and returns a PipelineResult
tagged with the step that failed. The credential is an opaque input; clearing
it after a rejected call is up to the caller (see `session_expired`).

A playlist created in step 3 is left in place if step 4 fails. Its id stays on
the result so the caller can report it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

import requests

from ..clients.spotify import UNEXPECTED_RESPONSE
from ..errors import SpotifyError, SessionExpired, NoTopTracks, ProviderRequestError
from .profile import fetch_me
from .tracks import Selection, top_tracks
from .playlists import create_playlist, add_tracks, playlist_name

logger = logging.getLogger(__name__)


class Step(str, Enum):
    FETCH_PROFILE = "fetch_profile"
    FETCH_TOP_TRACKS = "fetch_top_tracks"
    CREATE_PLAYLIST = "create_playlist"
    ADD_TRACKS = "add_tracks"


@dataclass
class PipelineResult:
    user_id: Optional[str] = None
    track_uris: List[str] = field(default_factory=list)
    playlist_id: Optional[str] = None
    failed_step: Optional[Step] = None
    error: Optional[SpotifyError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def session_expired(self) -> bool:
        return isinstance(self.error, SessionExpired)

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None


@dataclass
class _Run:
    credential: str
    selection: Selection
    result: PipelineResult = field(default_factory=PipelineResult)


def _fetch_profile(run: _Run) -> None:
    me = fetch_me(run.credential)
    run.result.user_id = me["id"]


def _fetch_top_tracks(run: _Run) -> None:
    items = top_tracks(run.credential, run.selection)
    if not items:
        raise NoTopTracks()
    run.result.track_uris = [t["uri"] for t in items]


def _create_playlist(run: _Run) -> None:
    playlist = create_playlist(
        run.credential,
        run.result.user_id,
        name=playlist_name(run.selection.limit),
    )
    run.result.playlist_id = playlist["id"]


def _add_tracks(run: _Run) -> None:
    add_tracks(run.credential, run.result.playlist_id, run.result.track_uris)


STEPS: List[Tuple[Step, Callable[[_Run], None]]] = [
    (Step.FETCH_PROFILE, _fetch_profile),
    (Step.FETCH_TOP_TRACKS, _fetch_top_tracks),
    (Step.CREATE_PLAYLIST, _create_playlist),
    (Step.ADD_TRACKS, _add_tracks),
]


def run_pipeline(credential: str, selection: Selection | None = None) -> PipelineResult:
    """
    Run every step in STEPS, halting on the first failure.
    Never raises SpotifyError, requests errors or errors from malformed response
    bodies; they end up on the result.
    """
    run = _Run(credential=credential, selection=selection or Selection())

    for step, action in STEPS:
        logger.debug("Pipeline step %s", step.value)
        try:
            action(run)
        except SpotifyError as e:
            return _fail(run, step, e)
        except (KeyError, TypeError, AttributeError):
            # body parsed but not shaped like the documented response
            logger.exception("Malformed Spotify response during %s", step.value)
            return _fail(run, step, ProviderRequestError(UNEXPECTED_RESPONSE))
        except requests.RequestException as e:
            logger.exception("Transport error during %s", step.value)
            return _fail(run, step, ProviderRequestError(f"Could not reach Spotify: {e}"))

    logger.info(
        "Created playlist %s with %d tracks for user %s",
        run.result.playlist_id, len(run.result.track_uris), run.result.user_id,
    )
    return run.result


def _fail(run: _Run, step: Step, error: SpotifyError) -> PipelineResult:
    run.result.failed_step = step
    run.result.error = error
    logger.error(
        "Pipeline failed at %s (provider status %s): %s",
        step.value, getattr(error, "status_code", None), error.message,
    )
    if step is Step.ADD_TRACKS and run.result.playlist_id:
        logger.warning("Playlist %s was created but left without tracks", run.result.playlist_id)
    return run.result

