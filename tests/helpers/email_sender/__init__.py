"""Test helpers for email sender implementations."""

from .recording_sender import RecordingEmailSender

__all__ = ["RecordingEmailSender"]
