from urllib.parse import urlparse, parse_qs

import pytest

from toptracks.services.auth import (
    SCOPES, build_auth_url, generate_oauth_state, save_oauth_state, validate_oauth_state,
)


def _query(url):
    return parse_qs(urlparse(url).query)


@pytest.mark.unit
def test_auth_url_targets_authorize_endpoint_with_token_response():
    url = build_auth_url("cid", "https://app.example/cb", SCOPES)
    parsed = urlparse(url)
    assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == "https://accounts.spotify.com/authorize"
    q = _query(url)
    assert q["client_id"] == ["cid"]
    assert q["response_type"] == ["token"]
    assert q["redirect_uri"] == ["https://app.example/cb"]
    assert q["scope"] == [" ".join(SCOPES)]
    assert "show_dialog" not in q
    assert "state" not in q


@pytest.mark.unit
def test_scopes_are_joined_with_percent_20():
    url = build_auth_url("cid", "https://app.example/cb", ["user-top-read", "user-read-email"])
    assert "scope=user-top-read%20user-read-email" in url
    assert "+" not in url


@pytest.mark.unit
def test_optional_show_dialog_and_state():
    q = _query(build_auth_url("cid", "https://app.example/cb", SCOPES, show_dialog=True, state="s1"))
    assert q["show_dialog"] == ["true"]
    assert q["state"] == ["s1"]


@pytest.mark.unit
def test_auth_url_is_deterministic():
    args = ("cid", "https://app.example/cb", SCOPES)
    assert build_auth_url(*args, state="x") == build_auth_url(*args, state="x")


@pytest.mark.unit
def test_requested_scopes_cover_the_pipeline():
    assert {"user-top-read", "playlist-modify-public", "playlist-modify-private"} <= set(SCOPES)


@pytest.mark.unit
def test_state_is_one_time_use():
    session = {}
    state = generate_oauth_state()
    save_oauth_state(session, state)
    assert validate_oauth_state(session, state) is True
    assert validate_oauth_state(session, state) is False


@pytest.mark.unit
def test_state_mismatch_or_missing_is_rejected():
    session = {}
    save_oauth_state(session, "expected")
    assert validate_oauth_state(session, "other") is False
    assert validate_oauth_state({}, None) is False


@pytest.mark.unit
def test_generated_states_differ():
    assert generate_oauth_state() != generate_oauth_state()
