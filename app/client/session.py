from typing import Optional


class SessionContext:
    """Holds the signed-in user and their bearer token for one running client."""

    def __init__(self):
        self.user: Optional[dict] = None
        self.token: Optional[str] = None
        self.is_logged_in: bool = False

    def get_token(self) -> Optional[str]:
        return self.token

    def set_user(self, user: dict):
        self.user = user

    def set_token(self, token: str):
        self.token = token

    def set_logged_in(self, value: bool = True):
        self.is_logged_in = value

    def clear(self):
        self.user = None
        self.token = None
        self.is_logged_in = False
