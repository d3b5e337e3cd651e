# toptracks/views/auth.py
'''
This module handles the authentication flow for Spotify integration.
 - Redirects users to Spotify for login (implicit grant, token comes back in the URL fragment).
 - Serves the callback page, which hands the fragment to receive_token.
 - Parses the fragment, validates the OAuth state and stores the token in the session.
 - Logs the user out by forgetting the stored token.
'''

import logging

from django.conf import settings
from django.http import HttpResponse, HttpResponseBadRequest, HttpResponseRedirect
from django.middleware.csrf import get_token
from django.utils.html import format_html
from django.views.decorators.http import require_GET, require_POST

from ..services import auth as svc
from ..services.fragment import parse_fragment, credential_from_fragment
from ..services.token_store import TokenStore
from ..state import LoginStarted, LoggedOut, TokenLoaded, ErrorRaised, reduce, load_state, store_state

logger = logging.getLogger(__name__)


@require_GET
def login_redirect(request):
    TokenStore(request.session).clear()
    store_state(request.session, reduce(load_state(request.session), LoginStarted()))

    state = svc.generate_oauth_state()
    svc.save_oauth_state(request.session, state)
    url = svc.build_auth_url(
        settings.SPOTIFY_CLIENT_ID,
        settings.SPOTIFY_REDIRECT_URI,
        svc.SCOPES,
        show_dialog=settings.SPOTIFY_SHOW_DIALOG,
        state=state,
    )
    return HttpResponseRedirect(url)


@require_GET
def auth_callback(request):
    # Spotify reports some failures in the query string instead of the fragment
    if "error" in request.GET:
        return HttpResponseBadRequest(f"Spotify auth error: {request.GET['error']}")

    return HttpResponse(format_html(
        """
      <html>
        <head><title>Signing in...</title></head>
        <body style="font-family: sans-serif; padding: 24px;">
          <p>Signing in...</p>
          <form id="fragment-form" method="post" action="/auth/token">
            <input type="hidden" name="csrfmiddlewaretoken" value="{}">
            <input type="hidden" name="fragment" id="fragment">
          </form>
          <script>
            document.getElementById("fragment").value = window.location.hash.substring(1);
            document.getElementById("fragment-form").submit();
          </script>
        </body>
      </html>
        """,
        get_token(request),
    ))


@require_POST
def receive_token(request):
    """
    Accepts the callback fragment as form field `fragment`. Always ends with a
    redirect to "/" so the address bar no longer carries the token.
    """
    params = parse_fragment(request.POST.get("fragment", ""))
    view_state = load_state(request.session)

    if params.get("error"):
        logger.warning("Spotify authorization was not granted: %s", params["error"])
        view_state = reduce(view_state, ErrorRaised(f"Spotify auth error: {params['error']}"))
        store_state(request.session, view_state)
        return HttpResponseRedirect("/")

    token = credential_from_fragment(params)
    if token is None:
        return HttpResponseRedirect("/")

    if not svc.validate_oauth_state(request.session, params.get("state")):
        logger.warning("Rejected Spotify callback with invalid OAuth state")
        return HttpResponseBadRequest("Invalid OAuth state")

    TokenStore(request.session).save(token)
    store_state(request.session, reduce(view_state, TokenLoaded(True)))
    logger.info("Stored Spotify token for session")
    return HttpResponseRedirect("/")


@require_POST
def logout(request):
    TokenStore(request.session).clear()
    store_state(request.session, reduce(load_state(request.session), LoggedOut()))
    return HttpResponseRedirect("/")
