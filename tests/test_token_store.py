import pytest
from django.contrib.sessions.backends.cache import SessionStore

from toptracks.services.token_store import TokenStore, TOKEN_SESSION_KEY


@pytest.mark.unit
def test_save_then_load_round_trips():
    store = TokenStore(SessionStore())
    store.save("BQD-token")
    assert store.load() == "BQD-token"


@pytest.mark.unit
def test_clear_then_load_is_absent():
    store = TokenStore(SessionStore())
    store.save("BQD-token")
    store.clear()
    assert store.load() is None


@pytest.mark.unit
def test_clear_is_idempotent():
    session = SessionStore()
    store = TokenStore(session)
    store.save("BQD-token")
    store.clear()
    store.clear()
    assert store.load() is None
    assert TOKEN_SESSION_KEY not in session


@pytest.mark.unit
def test_token_is_not_stored_in_plain_text():
    session = {}
    TokenStore(session).save("BQD-token")
    assert session[TOKEN_SESSION_KEY] != "BQD-token"
    assert "BQD-token" not in session[TOKEN_SESSION_KEY]


@pytest.mark.unit
def test_survives_a_new_store_on_the_same_session():
    session = SessionStore()
    TokenStore(session).save("BQD-token")
    session.save()
    reloaded = SessionStore(session_key=session.session_key)
    assert TokenStore(reloaded).load() == "BQD-token"


@pytest.mark.unit
def test_undecryptable_value_is_dropped():
    session = {TOKEN_SESSION_KEY: "not-a-fernet-token"}
    assert TokenStore(session).load() is None
    assert TOKEN_SESSION_KEY not in session
