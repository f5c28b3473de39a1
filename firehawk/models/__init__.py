"""Data models package."""

from .contact import ContactMessage, STATUS_NEW, STATUS_REPLIED, STATUSES

__all__ = [
    'ContactMessage',
    'STATUS_NEW',
    'STATUS_REPLIED',
    'STATUSES',
]
