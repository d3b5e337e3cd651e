import pytest
from django.core.exceptions import ImproperlyConfigured

from topsite import settings as site_settings


@pytest.mark.unit
def test_secret_key_required_outside_debug(monkeypatch):
    monkeypatch.delenv("DJANGO_SECRET_KEY", raising=False)
    with pytest.raises(ImproperlyConfigured):
        site_settings._secret_key(False)


@pytest.mark.unit
def test_secret_key_default_only_in_debug(monkeypatch):
    monkeypatch.delenv("DJANGO_SECRET_KEY", raising=False)
    assert site_settings._secret_key(True) == "dev-only-change-me"


@pytest.mark.unit
def test_secret_key_from_env(monkeypatch):
    monkeypatch.setenv("DJANGO_SECRET_KEY", "s3cret")
    assert site_settings._secret_key(False) == "s3cret"
