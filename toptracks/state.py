# toptracks/state.py
"""
Page state for the home view.

ViewState is immutable; every change goes through `reduce(state, event)`.
Between requests the state is kept in the session as a plain dict
(`load_state` / `store_state`), next to the encrypted token.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union

from .services.pipeline import PipelineResult
from .services.tracks import Selection, TimeRange

SUCCESS_NOTICE = "Playlist created successfully!"
NO_TOKEN_ERROR = "No authentication token found. Please log in."
UNEXPECTED_ERROR = "Something went wrong. Please try again."

_STATE_SESSION_KEY = "view_state"


@dataclass(frozen=True)
class ViewState:
    has_token: bool = False
    loading: bool = False
    error: Optional[str] = None
    notice: Optional[str] = None
    selection: Selection = Selection()


# ---- Events -----------------------------------------------------------------

@dataclass(frozen=True)
class TokenLoaded:
    present: bool


@dataclass(frozen=True)
class LoginStarted:
    pass


@dataclass(frozen=True)
class LoggedOut:
    pass


@dataclass(frozen=True)
class SelectionChanged:
    selection: Selection


@dataclass(frozen=True)
class PipelineStarted:
    pass


@dataclass(frozen=True)
class PipelineFinished:
    result: PipelineResult


@dataclass(frozen=True)
class ErrorRaised:
    message: str


@dataclass(frozen=True)
class NoticeShown:
    pass


Event = Union[
    TokenLoaded, LoginStarted, LoggedOut, SelectionChanged,
    PipelineStarted, PipelineFinished, ErrorRaised, NoticeShown,
]


def reduce(state: ViewState, event: Event) -> ViewState:
    if isinstance(event, TokenLoaded):
        if not event.present:
            # nothing can be in flight without a token
            return replace(state, has_token=False, loading=False)
        return replace(state, has_token=True)
    if isinstance(event, LoginStarted):
        return replace(state, has_token=False, loading=False, error=None, notice=None)
    if isinstance(event, LoggedOut):
        return replace(state, has_token=False, loading=False, error=None, notice=None)
    if isinstance(event, SelectionChanged):
        return replace(state, selection=event.selection)
    if isinstance(event, PipelineStarted):
        return replace(state, loading=True, error=None, notice=None)
    if isinstance(event, PipelineFinished):
        result = event.result
        if result.ok:
            return replace(state, loading=False, error=None, notice=SUCCESS_NOTICE)
        return replace(
            state,
            loading=False,
            error=result.message,
            notice=None,
            has_token=state.has_token and not result.session_expired,
        )
    if isinstance(event, ErrorRaised):
        return replace(state, loading=False, error=event.message, notice=None)
    if isinstance(event, NoticeShown):
        return replace(state, notice=None)
    raise TypeError(f"Unknown event: {event!r}")


# ---- Session persistence ----------------------------------------------------

def load_state(session) -> ViewState:
    raw = session.get(_STATE_SESSION_KEY) or {}
    selection = Selection()
    sel = raw.get("selection") or {}
    if sel:
        selection = Selection(time_range=TimeRange(sel["time_range"]), limit=int(sel["limit"]))
    return ViewState(
        has_token=bool(raw.get("has_token", False)),
        loading=bool(raw.get("loading", False)),
        error=raw.get("error"),
        notice=raw.get("notice"),
        selection=selection,
    )


def store_state(session, state: ViewState) -> None:
    session[_STATE_SESSION_KEY] = {
        "has_token": state.has_token,
        "loading": state.loading,
        "error": state.error,
        "notice": state.notice,
        "selection": state.selection.as_dict(),
    }
