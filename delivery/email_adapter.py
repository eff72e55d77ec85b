"""
Email delivery adapter.

Sends the styled comparison summary with the PDF report attached through
the messaging gateway. Best effort: failures are logged and reported in
the returned outcome, never raised.
"""

import base64
import logging
import time
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.errors import DeliveryFailure
from core.models import ComparisonResult
from utils.config import Config
from utils.formatting import format_currency, format_percent

from .gateway import GatewayClient
from .results import DeliveryChannel, DeliveryOutcome
from .summary import ComparisonSummary, summarize


logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
EMAIL_TEMPLATE = "comparison_email.html"
EMAIL_SUBJECT = "Your Property Sale Options Comparison Report"
ATTACHMENT_CONTENT_TYPE = "application/pdf"

_environment = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)


def default_attachment_name() -> str:
    return f"sale-options-comparison-{int(time.time() * 1000)}.pdf"


class EmailDeliveryAdapter:
    """
    Message-with-attachment channel.

    Usage:
        adapter = EmailDeliveryAdapter()
        outcome = adapter.deliver(contact_id, comparison, pdf_bytes)
    """

    def __init__(
        self,
        client: Optional[GatewayClient] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or (client.config if client else Config.load())
        self.client = client or GatewayClient(self.config)

    def build_html(self, comparison: ComparisonResult, has_attachment: bool = True) -> str:
        """Render the HTML email body."""
        summary = summarize(comparison)
        recommended = comparison.recommended_option

        template = _environment.get_template(EMAIL_TEMPLATE)
        return template.render(
            summary=summary,
            brand_name=self.config.brand_name,
            contact_phone=self.config.contact_phone,
            contact_email=self.config.contact_email,
            property_value=format_currency(summary.property_value),
            equity=format_currency(summary.equity),
            equity_percentage=format_percent(summary.equity_percentage),
            recommended_description=recommended.description,
            recommended_net=format_currency(summary.recommended.net_proceeds),
            has_attachment=has_attachment,
        )

    def build_payload(
        self,
        destination: str,
        comparison: ComparisonResult,
        attachment: Optional[bytes] = None,
        attachment_name: Optional[str] = None,
    ) -> dict:
        """Build the gateway request body."""
        payload = {
            "type": "Email",
            "contactId": destination,
            "subject": EMAIL_SUBJECT,
            "html": self.build_html(comparison, has_attachment=attachment is not None),
        }
        if attachment is not None:
            payload["attachments"] = [
                {
                    "name": attachment_name or default_attachment_name(),
                    "content": base64.b64encode(attachment).decode("ascii"),
                    "contentType": ATTACHMENT_CONTENT_TYPE,
                }
            ]
        return payload

    def deliver(
        self,
        destination: str,
        comparison: ComparisonResult,
        attachment: Optional[bytes] = None,
        attachment_name: Optional[str] = None,
    ) -> DeliveryOutcome:
        """
        Send the comparison email.

        Never raises: a failed send, or a payload that cannot be built, is
        logged with the destination and a summary of what would have been
        sent.

        Args:
            destination: Gateway contact identifier for the recipient
            comparison: Comparison to summarise
            attachment: Rendered PDF bytes (optional)
            attachment_name: Filename for the attachment

        Returns:
            DeliveryOutcome describing the attempt
        """
        summary = None
        try:
            summary = summarize(comparison)
            payload = self.build_payload(destination, comparison, attachment, attachment_name)
            self.client.post_message(payload)
        except DeliveryFailure as exc:
            error = str(exc)
            logger.error("Comparison email to %s failed: %s", destination, exc)
            if exc.response_text:
                logger.error("Gateway response: %s", exc.response_text)
        except Exception as exc:
            error = f"{type(exc).__name__}: {exc}"
            logger.error(
                "Comparison email to %s failed unexpectedly: %s",
                destination,
                error,
                exc_info=True,
            )
        else:
            logger.info("Comparison email sent to %s", destination)
            return DeliveryOutcome(
                channel=DeliveryChannel.EMAIL,
                destination=destination,
                delivered=True,
            )

        _log_fallback(destination, summary)
        return DeliveryOutcome(
            channel=DeliveryChannel.EMAIL,
            destination=destination,
            delivered=False,
            error=error,
        )


def _log_fallback(destination: str, summary: Optional[ComparisonSummary]) -> None:
    # Record of the intended message
    logger.info(
        "Comparison email fallback - would send to %s: %s",
        destination,
        summary.describe() if summary else "summary unavailable",
    )
