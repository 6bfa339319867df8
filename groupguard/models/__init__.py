"""
Data models
"""

from .member import Member
from .token import VerificationToken, MalformedTokenError

__all__ = ['Member', 'VerificationToken', 'MalformedTokenError']
