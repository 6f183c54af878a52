"""Builds the outbound notification email for a contact submission."""

from __future__ import annotations

from core.settings import ContactRelaySettings
from domain.contact import ContactSubmission
from domain.email_sender import EmailMessage


BANNER = "-" * 41

# Downstream mail filters match this sign-off verbatim.
SIGN_OFF = "- The Java Contact Server Bot"

SUBJECT_TEMPLATE = "New work call from {name} (Urgent!)"

BODY_TEMPLATE = (
    "Hey!\n\nYou got a new message from your portfolio website. Check it out:\n\n"
    "Submitted By (Name): {name}\n"
    "Contact Email: {email}\n\n"
    "Their Message:\n"
    f"{BANNER}\n"
    "{message}\n"
    f"{BANNER}\n"
    "\n\n"
    f"{SIGN_OFF}"
)


def compose_contact_email(
    submission: ContactSubmission, settings: ContactRelaySettings
) -> EmailMessage:
    """Return the notification for *submission*, addressed to the configured receiver.

    Reply-To carries the submitter's address unchanged so the receiver can
    answer the visitor directly.
    """

    return EmailMessage(
        to=[settings.receiver_address],
        subject=SUBJECT_TEMPLATE.format(name=submission.name),
        body=BODY_TEMPLATE.format(
            name=submission.name,
            email=submission.email,
            message=submission.message,
        ),
        from_address=settings.sender_address,
        from_name=settings.sender_name,
        reply_to=submission.email,
    )
