"""Email delivery of estimate reports over SMTP."""

from __future__ import annotations

import logging
import re
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import TYPE_CHECKING

from buildcalc.exceptions import EmailDispatchError, InvalidEmailAddressError
from buildcalc.formatting import format_currency
from buildcalc.reporting.pdf_report import REPORT_FILENAME, REPORT_TITLE, render_estimate_pdf

if TYPE_CHECKING:
    from buildcalc.models.estimate import EstimationResult

logger = logging.getLogger(__name__)

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class SmtpSettings:
    """Connection settings for the outgoing mail server."""

    host: str
    port: int = 587
    sender: str = "noreply@buildcalc.local"
    username: str | None = None
    password: str | None = None
    use_tls: bool = True
    timeout: float = 10.0


def is_valid_email(address: str) -> bool:
    return bool(_EMAIL_PATTERN.match(address))


class EstimateMailer:
    """Sends an estimate summary with the PDF report attached.

    Args:
        settings: SMTP connection settings.
    """

    def __init__(self, settings: SmtpSettings) -> None:
        self._settings = settings

    def build_message(self, recipient: str, result: EstimationResult) -> EmailMessage:
        """Compose the email without sending it."""
        message = EmailMessage()
        message["Subject"] = REPORT_TITLE
        message["From"] = self._settings.sender
        message["To"] = recipient
        message.set_content(_summary_text(result))
        message.add_attachment(
            render_estimate_pdf(result),
            maintype="application",
            subtype="pdf",
            filename=REPORT_FILENAME,
        )
        return message

    def send_estimate(self, recipient: str, result: EstimationResult) -> None:
        """Email the estimate to ``recipient``.

        Raises:
            InvalidEmailAddressError: If the address is malformed.
            EmailDispatchError: If the SMTP exchange fails.
        """
        recipient = recipient.strip()
        if not is_valid_email(recipient):
            msg = "Invalid email address"
            raise InvalidEmailAddressError(msg)

        message = self.build_message(recipient, result)
        settings = self._settings
        try:
            with smtplib.SMTP(settings.host, settings.port, timeout=settings.timeout) as smtp:
                if settings.use_tls:
                    smtp.starttls()
                if settings.username:
                    smtp.login(settings.username, settings.password or "")
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.exception("Failed to send estimate email via %s", settings.host)
            msg = "Failed to send email"
            raise EmailDispatchError(msg) from exc

        logger.info("Sent estimate report to %s", recipient)


def _summary_text(result: EstimationResult) -> str:
    summary = result.to_summary_dict()
    lines = [
        "Your building material estimate is attached as a PDF.",
        "",
        f"Floors: {summary['floors']} ({summary['building_height']} high)",
        f"Slab type: {summary['slab_type']}",
        f"Concrete: {summary['concrete_volume']}",
        f"Cement: {summary['cement']}",
        f"Sand: {summary['sand']}",
        f"Aggregate: {summary['aggregate']}",
        f"Steel: {summary['steel']}",
        f"Water: {summary['water']}",
        f"Laborers: {summary['number_of_laborers']}",
        f"Labor cost: {format_currency(result.costs.labor)}",
        f"Total cost: {format_currency(result.costs.total)}",
        "",
        "Sustainability suggestions:",
    ]
    lines.extend(f"- {tip}" for tip in result.sustainability_suggestions)
    return "\n".join(lines) + "\n"
