"""Forms package."""

from .contact import ContactForm, ReplyForm

__all__ = ['ContactForm', 'ReplyForm']
