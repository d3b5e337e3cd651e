# toptracks/services/token_store.py
'''
Session-scoped storage for the Spotify credential.
 - save / load / clear one bearer token in the Django session.
 - The token is Fernet-encrypted before it is written to the session backend.
'''

from __future__ import annotations

import logging

from cryptography.fernet import InvalidToken

from ..utils import encrypt_token, decrypt_token

logger = logging.getLogger(__name__)

TOKEN_SESSION_KEY = "spotify_token"


class TokenStore:
    def __init__(self, session):
        self.session = session

    def save(self, credential: str) -> None:
        self.session[TOKEN_SESSION_KEY] = encrypt_token(credential)

    def load(self) -> str | None:
        stored = self.session.get(TOKEN_SESSION_KEY)
        if not stored:
            return None
        try:
            return decrypt_token(stored)
        except InvalidToken:
            # written under a different key; nothing usable left in it
            logger.warning("Discarding stored Spotify token that no longer decrypts")
            self.clear()
            return None

    def clear(self) -> None:
        self.session.pop(TOKEN_SESSION_KEY, None)
