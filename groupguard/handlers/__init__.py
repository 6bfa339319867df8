"""
Handler modules
"""

from .gate import MembershipGate
from .commands import CommandProcessor, parse_command, parse_duration_minutes
from .moderation import KeywordEnforcer
from .router import UpdateRouter, register_moderation

__all__ = [
    'MembershipGate', 'CommandProcessor', 'parse_command', 'parse_duration_minutes',
    'KeywordEnforcer', 'UpdateRouter', 'register_moderation',
]
