# toptracks/utils.py
import base64
import hashlib
from functools import lru_cache

from cryptography.fernet import Fernet
from django.conf import settings


@lru_cache(maxsize=None)
def _fernet_for(key: str) -> Fernet:
    return Fernet(key.encode())


def get_fernet() -> Fernet:
    key = settings.FERNET_KEY
    if not key:
        # no explicit key: derive a stable one from SECRET_KEY
        digest = hashlib.sha256(settings.SECRET_KEY.encode()).digest()
        key = base64.urlsafe_b64encode(digest).decode()
    return _fernet_for(key)


def encrypt_token(token: str) -> str:
    return get_fernet().encrypt(token.encode()).decode()


def decrypt_token(token: str) -> str:
    return get_fernet().decrypt(token.encode()).decode()
