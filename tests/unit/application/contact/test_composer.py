"""Tests for the contact email composer."""

from application.contact import compose_contact_email
from application.contact.composer import BANNER
from domain.contact import ContactSubmission


def test_jane_example(settings):
    submission = ContactSubmission(name="Jane", email="jane@x.com", message="Hi")

    message = compose_contact_email(submission, settings)

    assert message.subject == "New work call from Jane (Urgent!)"
    assert message.reply_to == "jane@x.com"
    assert f"{BANNER}\nHi\n{BANNER}" in message.body
    assert "Submitted By (Name): Jane" in message.body
    assert "Contact Email: jane@x.com" in message.body


def test_addresses_come_from_settings(settings):
    message = compose_contact_email(ContactSubmission("Jane", "jane@x.com", "Hi"), settings)

    assert message.to == ["owner@example.com"]
    assert message.from_address == "relay@example.com"
    assert message.formatted_from == "Portfolio Alert Service <relay@example.com>"


def test_body_matches_exactly(settings):
    message = compose_contact_email(ContactSubmission("Jane", "jane@x.com", "Hi"), settings)

    assert message.body == (
        "Hey!\n\nYou got a new message from your portfolio website. Check it out:\n\n"
        "Submitted By (Name): Jane\n"
        "Contact Email: jane@x.com\n\n"
        "Their Message:\n"
        "-----------------------------------------\n"
        "Hi\n"
        "-----------------------------------------\n"
        "\n\n- The Java Contact Server Bot"
    )
    assert len(BANNER) == 41


def test_user_text_is_inserted_verbatim(settings):
    submission = ContactSubmission(
        name="{name}", email="a@b", message="<b>line1</b>\n{message}\nline3"
    )

    message = compose_contact_email(submission, settings)

    assert message.subject == "New work call from {name} (Urgent!)"
    assert "<b>line1</b>\n{message}\nline3" in message.body
