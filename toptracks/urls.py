# toptracks/urls.py
from django.urls import path
from .views import auth, session, playlists, root, tracks

urlpatterns = [
    # Root + health
    path("", root.root),
    path("health", root.health),

    # Auth
    path("auth/login", auth.login_redirect),
    path("auth/callback", auth.auth_callback),
    path("auth/token", auth.receive_token),
    path("auth/logout", auth.logout),

    # Session
    path("api/session", session.session_me),

    # Top tracks preview
    path("api/top-tracks", tracks.top_tracks_preview),

    # Playlist creation
    path("playlists/top-tracks", playlists.create_top_tracks_playlist),
]
