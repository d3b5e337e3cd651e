# toptracks/views/root.py
'''
This module provides the home page and health check views.
- render_home turns a ViewState into the page: a login link when no token is stored,
  otherwise the selection form and the "create playlist" button.
- The home view rehydrates the token from the session before rendering.
- The health view returns a JSON response indicating the service is operational.
'''

from django.http import HttpResponse, JsonResponse
from django.middleware.csrf import get_token
from django.utils.html import format_html, format_html_join
from django.views.decorators.http import require_GET

from ..services.token_store import TokenStore
from ..services.tracks import TimeRange, TRACK_COUNTS
from ..state import ViewState, TokenLoaded, NoticeShown, reduce, load_state, store_state

TIME_RANGE_LABELS = {
    TimeRange.SHORT: "Last 4 weeks",
    TimeRange.MEDIUM: "Last 6 months",
    TimeRange.LONG: "All time",
}

_PAGE = """
      <html>
        <head><title>Spotify Top Tracks</title></head>
        <body style="font-family: sans-serif; padding: 24px;">
          <h1>Spotify Top Tracks Playlist Creator</h1>
          {messages}
          {controls}
        </body>
      </html>
"""

_BUTTON_STYLE = "display:inline-block;padding:10px 14px;background:#1DB954;color:#fff;text-decoration:none;border:0;border-radius:6px;"


def _option(value, label, selected):
    if selected:
        return format_html('<option value="{}" selected>{}</option>', value, label)
    return format_html('<option value="{}">{}</option>', value, label)


def _messages(state: ViewState) -> str:
    parts = []
    if state.error:
        parts.append(format_html('<p class="error-message" style="color:#c0392b;">{}</p>', state.error))
    if state.notice:
        parts.append(format_html('<p class="notice">{}</p>', state.notice))
    return "".join(parts)


def _login_controls(state: ViewState) -> str:
    label = "Login Again" if state.error else "Login with Spotify"
    return format_html('<a href="/auth/login" style="{}">{}</a>', _BUTTON_STYLE, label)


def _action_controls(state: ViewState, csrf_token: str) -> str:
    sel = state.selection
    ranges = format_html_join(
        "", "{}", ((_option(r.value, TIME_RANGE_LABELS[r], r == sel.time_range),) for r in TimeRange)
    )
    counts = format_html_join(
        "", "{}", ((_option(n, n, n == sel.limit),) for n in TRACK_COUNTS)
    )
    if state.loading:
        button = format_html('<button type="submit" style="{}" disabled>Creating...</button>', _BUTTON_STYLE)
    else:
        button = format_html(
            '<button type="submit" style="{}">Create Top {} Playlist</button>', _BUTTON_STYLE, sel.limit
        )
    return format_html(
        """
          <form method="post" action="/playlists/top-tracks">
            <input type="hidden" name="csrfmiddlewaretoken" value="{}">
            <select name="time_range">{}</select>
            <select name="limit">{}</select>
            {}
          </form>
          <form method="post" action="/auth/logout">
            <input type="hidden" name="csrfmiddlewaretoken" value="{}">
            <button type="submit">Log out</button>
          </form>
        """,
        csrf_token, ranges, counts, button, csrf_token,
    )


def render_home(state: ViewState, csrf_token: str = "") -> str:
    controls = _action_controls(state, csrf_token) if state.has_token else _login_controls(state)
    return _PAGE.format(messages=_messages(state), controls=controls)


@require_GET
def root(request):
    state = load_state(request.session)
    state = reduce(state, TokenLoaded(TokenStore(request.session).load() is not None))
    html = render_home(state, get_token(request))
    # the success notice is shown once
    store_state(request.session, reduce(state, NoticeShown()))
    return HttpResponse(html)


def health(_request):
    return JsonResponse({"ok": True})
