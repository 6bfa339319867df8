# groupguard/__init__.py
"""
GroupGuard - Telegram group moderation bot: join verification, keyword blocklist, admin commands
"""

__version__ = "1.0.0"
