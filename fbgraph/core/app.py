"""Graph application credentials."""
from .auth.access_token import AccessToken


class GraphApp:
    """App id and secret pair."""

    def __init__(self, app_id: str, secret: str):
        self.id = str(app_id)
        self.secret = secret

    def get_id(self) -> str:
        return self.id

    def get_secret(self) -> str:
        return self.secret

    def get_access_token(self) -> AccessToken:
        """Returns an app access token (``id|secret``)."""
        return AccessToken(f"{self.id}|{self.secret}")

    def serialize(self) -> str:
        return '|'.join([self.id, self.secret])

    @classmethod
    def unserialize(cls, data: str) -> 'GraphApp':
        app_id, secret = data.split('|', 1)
        return cls(app_id, secret)

    def __eq__(self, other) -> bool:
        if isinstance(other, GraphApp):
            return self.id == other.id and self.secret == other.secret
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.id, self.secret))

    def __repr__(self) -> str:
        return f"GraphApp(id={self.id!r})"
