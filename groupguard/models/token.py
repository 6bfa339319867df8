"""
Verification token carried in the challenge button.

The token is the bare pair ``(chat_id, user_id)`` serialised as
``verify:<chat_id>:<user_id>``. Nothing is stored server side between
issuing and clicking, and the payload is not signed: the only check at
resolution time is that the clicking user's id equals ``user_id``.
A token stays clickable after a successful verification.
"""
from dataclasses import dataclass

from ..config.constants import VERIFY_CALLBACK_PREFIX


class MalformedTokenError(ValueError):
    """Callback data looks like a verification token but cannot be decoded"""


@dataclass(frozen=True)
class VerificationToken:
    chat_id: int
    user_id: int

    def encode(self) -> str:
        return f"{VERIFY_CALLBACK_PREFIX}:{self.chat_id}:{self.user_id}"

    @staticmethod
    def matches(data: str) -> bool:
        """True if callback data belongs to the verification flow"""
        return bool(data) and data.startswith(f"{VERIFY_CALLBACK_PREFIX}:")

    @classmethod
    def decode(cls, data: str) -> 'VerificationToken':
        parts = data.split(":")
        if len(parts) < 3 or parts[0] != VERIFY_CALLBACK_PREFIX:
            raise MalformedTokenError(f"Bad verification payload: {data!r}")
        try:
            return cls(chat_id=int(parts[1]), user_id=int(parts[2]))
        except ValueError as e:
            raise MalformedTokenError(f"Bad verification payload: {data!r}") from e
