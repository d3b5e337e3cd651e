# toptracks/views/playlists.py
'''
This module handles the "create top tracks playlist" action.
- Reads the time range / track count from the form and remembers them in the session.
- Runs the playlist pipeline with the stored token and records the outcome for the home page.
'''

from django.http import HttpResponseBadRequest, HttpResponseRedirect
from django.views.decorators.http import require_POST

from ..errors import InvalidSelection
from ..services.pipeline import run_pipeline
from ..services.token_store import TokenStore
from ..services.tracks import Selection
from ..state import (
    NO_TOKEN_ERROR, UNEXPECTED_ERROR, ErrorRaised, PipelineFinished, PipelineStarted, SelectionChanged,
    TokenLoaded, reduce, load_state, store_state,
)


@require_POST
def create_top_tracks_playlist(request):
    session = request.session
    state = load_state(session)

    try:
        selection = Selection.from_params(request.POST, default=state.selection)
    except InvalidSelection as e:
        return HttpResponseBadRequest(str(e))
    state = reduce(state, SelectionChanged(selection))

    store = TokenStore(session)
    token = store.load()
    state = reduce(state, TokenLoaded(token is not None))
    if token is None:
        store_state(session, reduce(state, ErrorRaised(NO_TOKEN_ERROR)))
        return HttpResponseRedirect("/")

    # visible to other requests on this session while the calls run
    state = reduce(state, PipelineStarted())
    store_state(session, state)
    session.save()

    try:
        result = run_pipeline(token, selection)
    except Exception:
        # SessionMiddleware skips saving on a 500, so clear the flag explicitly
        store_state(session, reduce(state, ErrorRaised(UNEXPECTED_ERROR)))
        session.save()
        raise

    if result.session_expired:
        store.clear()
    store_state(session, reduce(state, PipelineFinished(result)))

    return HttpResponseRedirect("/")
