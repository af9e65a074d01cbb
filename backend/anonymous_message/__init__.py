"""Business rules of the anonymous messaging app: contacts, messages, answers."""

__version__ = "0.1.0"
