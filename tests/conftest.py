import os
import sys

import pytest

# Ensure project root is on sys.path so 'topsite' and 'toptracks' import correctly
_TESTS_DIR = os.path.dirname(__file__)
_ROOT_DIR = os.path.abspath(os.path.join(_TESTS_DIR, os.pardir))
if _ROOT_DIR not in sys.path:
    sys.path.insert(0, _ROOT_DIR)

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "topsite.settings")
os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret-key")
os.environ.setdefault("SPOTIFY_CLIENT_ID", "test-client-id")
os.environ.setdefault("SPOTIFY_REDIRECT_URI", "http://testserver/auth/callback")

import django

django.setup()

from django.test import Client
from django.test.utils import setup_test_environment

# adds "testserver" to ALLOWED_HOSTS
setup_test_environment()

from tests.support import stubs as test_stubs


@pytest.fixture
def spotify_api(monkeypatch):
    """Replace HTTP calls to Spotify with a recording fake."""
    return test_stubs.install_fake_spotify(monkeypatch)


@pytest.fixture
def client():
    return Client()


@pytest.fixture
def logged_in_client(client):
    test_stubs.login(client)
    return client
