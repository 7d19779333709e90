"""Feedback review API: list, tag and archive chatbot transcripts."""

__version__ = "0.1.0"
