"""
Chat member model
"""
from dataclasses import dataclass
from typing import Optional

from ..config.constants import TEXTS


@dataclass(frozen=True)
class Member:
    """A chat participant as seen in a single update"""
    id: int
    first_name: str = ""
    username: Optional[str] = None
    is_bot: bool = False

    @property
    def display_name(self) -> str:
        """@username when available, otherwise first name, otherwise a generic label"""
        if self.username:
            return f"@{self.username}"
        return self.first_name or TEXTS["default_member_name"]

    @classmethod
    def from_user(cls, user) -> 'Member':
        """Build from a telegram.User (or anything shaped like one)"""
        return cls(
            id=user.id,
            first_name=getattr(user, "first_name", "") or "",
            username=getattr(user, "username", None),
            is_bot=bool(getattr(user, "is_bot", False)),
        )
