"""In-memory contact message store.

Records live for the lifetime of the process only. Each application builds
one store in ``create_app``; multiple worker processes do not share records.
"""

import threading
import uuid
from datetime import datetime, timezone

from .models import ContactMessage, STATUS_NEW, STATUS_REPLIED


def utcnow():
    return datetime.now(timezone.utc)


def new_message_id():
    return str(uuid.uuid4())


class MessageStore:
    """Keyed collection of contact messages.

    Every record handed out is a copy; callers cannot change stored state
    except through ``create`` and ``reply``.
    """

    def __init__(self, clock=None, id_factory=None):
        self._clock = clock or utcnow
        self._id_factory = id_factory or new_message_id
        self._messages = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._messages)

    def create(self, fields):
        """Insert a new message built from validated form fields."""
        with self._lock:
            message_id = self._id_factory()
            while message_id in self._messages:
                message_id = self._id_factory()

            message = ContactMessage(
                id=message_id,
                name=fields['name'],
                email=fields['email'],
                subject=fields['subject'],
                message=fields['message'],
                created_at=self._clock(),
            )
            self._messages[message_id] = message
            return message.copy()

    def list_all(self, status=None):
        """Return all messages, newest first."""
        with self._lock:
            # Reversed insertion order puts later inserts first on ties
            messages = list(reversed(self._messages.values()))

        if status:
            messages = [m for m in messages if m.status == status]

        messages.sort(key=lambda m: m.created_at, reverse=True)
        return [m.copy() for m in messages]

    def get(self, message_id):
        with self._lock:
            message = self._messages.get(message_id)
            return message.copy() if message else None

    def reply(self, message_id, reply_text):
        """Record a reply. Returns None when the message does not exist.

        A later reply replaces an earlier one.
        """
        with self._lock:
            message = self._messages.get(message_id)
            if message is None:
                return None

            message.reply = reply_text
            message.replied_at = self._clock()
            message.status = STATUS_REPLIED
            return message.copy()

    def counts(self):
        """Totals per status, as shown on the operator dashboard."""
        with self._lock:
            statuses = [m.status for m in self._messages.values()]

        return {
            'total': len(statuses),
            STATUS_NEW: statuses.count(STATUS_NEW),
            STATUS_REPLIED: statuses.count(STATUS_REPLIED),
        }
