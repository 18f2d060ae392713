from pathlib import Path
from typing import Optional, Union


class SessionContext:
    """
    Holds the caller's token between requests.

    With a ``token_path`` the token survives restarts the way the browser's
    localStorage does; without one it lives only in memory.
    """

    def __init__(self, token_path: Union[str, Path, None] = None):
        self.token_path = Path(token_path) if token_path else None
        self.token: Optional[str] = None
        if self.token_path and self.token_path.exists():
            self.token = self.token_path.read_text(encoding="utf-8").strip() or None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def set(self, token: str) -> None:
        self.token = token
        if self.token_path:
            self.token_path.parent.mkdir(parents=True, exist_ok=True)
            self.token_path.write_text(token, encoding="utf-8")

    def clear(self) -> None:
        self.token = None
        if self.token_path:
            self.token_path.unlink(missing_ok=True)
