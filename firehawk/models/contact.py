"""Contact message model."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

STATUS_NEW = 'new'
STATUS_REPLIED = 'replied'
STATUSES = (STATUS_NEW, STATUS_REPLIED)


@dataclass
class ContactMessage:
    """Contact form message."""
    id: str
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime
    status: str = STATUS_NEW  # new, replied
    reply: Optional[str] = None
    replied_at: Optional[datetime] = None

    def copy(self):
        """Return a detached copy of this record."""
        return replace(self)

    def to_dict(self):
        """Serialize using the field names the front-end reads."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'subject': self.subject,
            'message': self.message,
            'status': self.status,
            'reply': self.reply,
            'createdAt': self.created_at.isoformat(),
            'repliedAt': self.replied_at.isoformat() if self.replied_at else None,
        }

    def __repr__(self):
        return f'<ContactMessage {self.id} {self.subject!r} {self.status}>'
