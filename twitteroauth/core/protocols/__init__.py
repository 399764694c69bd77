"""Protocols for swappable collaborators."""

from twitteroauth.core.protocols.transport import Transport

__all__ = ["Transport"]
