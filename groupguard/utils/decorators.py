"""
Decorator utilities for handlers
"""
import functools
import logging
from typing import Callable


def log_errors(func: Callable) -> Callable:
    """Log and swallow any exception so one bad update never affects the next"""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            logging.error(f"Error in {func.__name__}: {e}", exc_info=True)
            return None
    return wrapper
