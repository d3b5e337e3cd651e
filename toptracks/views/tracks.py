# toptracks/views/tracks.py
'''
This module handles views related to tracks.
- Provides an endpoint to preview the top tracks a playlist would be built from.
'''

import logging

import requests
from django.http import JsonResponse, HttpResponseForbidden, HttpResponseBadRequest
from django.views.decorators.http import require_GET

from ..errors import InvalidSelection, SpotifyError, SessionExpired
from ..services.profile import fetch_me
from ..services.token_store import TokenStore
from ..services.tracks import Selection, top_tracks, lite
from ..state import load_state

logger = logging.getLogger(__name__)


@require_GET
def top_tracks_preview(request):
    store = TokenStore(request.session)
    token = store.load()
    if not token:
        return HttpResponseForbidden("Not authenticated")

    try:
        selection = Selection.from_params(request.GET, default=load_state(request.session).selection)
    except InvalidSelection as e:
        return HttpResponseBadRequest(str(e))

    try:
        # same credential check the pipeline starts with
        fetch_me(token)
        items = top_tracks(token, selection)
    except SessionExpired as e:
        store.clear()
        return JsonResponse({"error": e.message}, status=401)
    except SpotifyError as e:
        return JsonResponse(
            {"error": e.message, "provider_status": getattr(e, "status_code", None)}, status=502
        )
    except requests.RequestException as e:
        logger.exception("Could not reach Spotify for top tracks preview")
        return JsonResponse({"error": f"Could not reach Spotify: {e}", "provider_status": None}, status=502)

    return JsonResponse({
        "items": [lite(t) for t in items],
        "selection": selection.as_dict(),
    })
