"""Reporting sink for step notes and failure screenshots."""

from portfolio_e2e.reporting.artifacts import ArtifactReporter, Attachment, sanitize_name

__all__ = ["ArtifactReporter", "Attachment", "sanitize_name"]
