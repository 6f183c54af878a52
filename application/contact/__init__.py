"""Contact relay application layer."""

from .composer import compose_contact_email
from .contact_service import ContactOutcome, ContactService, OutcomeKind

__all__ = ["ContactOutcome", "ContactService", "OutcomeKind", "compose_contact_email"]
