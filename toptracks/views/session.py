# toptracks/views/session.py
'''
This module handles session-related views.
 - Provides an endpoint to check the current browser session.
 - Returns the page state if a token is stored, or a 401 error if not.
'''

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from ..services.token_store import TokenStore
from ..state import load_state


@require_GET
def session_me(request):
    state = load_state(request.session)
    if TokenStore(request.session).load() is None:
        return JsonResponse({"authenticated": False, "error": state.error}, status=401)
    return JsonResponse({
        "authenticated": True,
        "loading": state.loading,
        "error": state.error,
        "notice": state.notice,
        "selection": state.selection.as_dict(),
    })
