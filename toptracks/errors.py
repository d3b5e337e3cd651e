# toptracks/errors.py
'''
Error types raised by the service layer.
 - SpotifyError and its subclasses abort the playlist pipeline at the step that raised them.
 - InvalidSelection is raised for time range / track count values outside the offered choices.
'''


class SpotifyError(Exception):
    """Base for failures talking to Spotify. `message` is shown to the user as-is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SessionExpired(SpotifyError):
    def __init__(self, message: str = "Session expired. Please log in again."):
        super().__init__(message)


class AuthenticationFailed(SpotifyError):
    def __init__(self, message: str = "Authentication failed. Please try logging in again."):
        super().__init__(message)


class NoTopTracks(SpotifyError):
    def __init__(self, message: str = "No top tracks found. Try listening to more music first!"):
        super().__init__(message)


class ProviderRequestError(SpotifyError):
    """Non-OK response (or transport failure) for an otherwise valid request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidSelection(ValueError):
    pass
