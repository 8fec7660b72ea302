"""Dependency construction for FastAPI endpoints."""

from __future__ import annotations

import logging
import os

from buildcalc.exceptions import EmailNotConfiguredError
from buildcalc.services.mailer import EstimateMailer, SmtpSettings

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def load_smtp_settings() -> SmtpSettings:
    """Read SMTP settings from the environment.

    Raises EmailNotConfiguredError if SMTP_HOST is not set.
    """
    host = os.environ.get("SMTP_HOST", "")
    if not host:
        msg = "Email delivery is not configured"
        raise EmailNotConfiguredError(msg)

    return SmtpSettings(
        host=host,
        port=int(os.environ.get("SMTP_PORT", "587")),
        sender=os.environ.get("SMTP_SENDER", "noreply@buildcalc.local"),
        username=os.environ.get("SMTP_USERNAME") or None,
        password=os.environ.get("SMTP_PASSWORD") or None,
        use_tls=os.environ.get("SMTP_USE_TLS", "true").strip().lower() in _TRUTHY,
    )


def create_mailer() -> EstimateMailer:
    """Create an EstimateMailer from environment configuration."""
    settings = load_smtp_settings()
    logger.info("Email delivery via %s:%d", settings.host, settings.port)
    return EstimateMailer(settings)
