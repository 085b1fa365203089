"""Use cases orchestrating command issuance."""

from __future__ import annotations

from .issue_command import CommandIssuer, DeferredCommandIssue

__all__ = ["CommandIssuer", "DeferredCommandIssue"]
