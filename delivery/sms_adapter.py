"""
SMS delivery adapter.

Sends a condensed plain-text comparison summary through the messaging
gateway. Best effort: failures are logged and reported in the returned
outcome, never raised.
"""

import logging
import re
from typing import Optional

from core.errors import DeliveryFailure
from core.models import ComparisonResult
from utils.config import Config
from utils.formatting import format_compact_currency

from .gateway import GatewayClient
from .results import DeliveryChannel, DeliveryOutcome
from .summary import summarize


logger = logging.getLogger(__name__)

COUNTRY_CODE = "1"
NATIONAL_NUMBER_DIGITS = 10


def _digits(phone: str) -> str:
    return re.sub(r"\D", "", phone)


def normalize_phone_number(phone: str) -> str:
    """
    Normalise a phone number to E.164.

    10 digits -> +1XXXXXXXXXX
    11 digits starting with 1 -> +1XXXXXXXXXX
    Anything else is returned unchanged (the gateway will reject it).
    """
    digits = _digits(phone)
    if len(digits) == NATIONAL_NUMBER_DIGITS:
        return f"+{COUNTRY_CODE}{digits}"
    if len(digits) == NATIONAL_NUMBER_DIGITS + 1 and digits.startswith(COUNTRY_CODE):
        return f"+{digits}"
    return phone


def is_valid_phone_number(phone: str) -> bool:
    """Whether the number normalises to a canonical +1 number."""
    digits = _digits(phone)
    return len(digits) == NATIONAL_NUMBER_DIGITS or (
        len(digits) == NATIONAL_NUMBER_DIGITS + 1 and digits.startswith(COUNTRY_CODE)
    )


class SmsDeliveryAdapter:
    """
    Short-text channel.

    Usage:
        adapter = SmsDeliveryAdapter()
        outcome = adapter.deliver("(214) 555-0100", comparison)
    """

    def __init__(
        self,
        client: Optional[GatewayClient] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or (client.config if client else Config.load())
        self.client = client or GatewayClient(self.config)

    def build_message(self, comparison: ComparisonResult) -> str:
        """Build the plain-text SMS body."""
        summary = summarize(comparison)
        recommended = summary.recommended

        lines = [
            f"{self.config.brand_name} Property Analysis:",
            "",
            f"Value: {format_compact_currency(summary.property_value)}",
            f"Your Equity: {format_compact_currency(summary.equity)} "
            f"({summary.equity_percentage:.0f}%)",
            "",
            f"RECOMMENDED: {recommended.name}",
            f"Net Proceeds: {format_compact_currency(recommended.net_proceeds)}",
            f"Timeline: {recommended.timeline}",
            "",
            "Compare all 3 options:",
        ]
        for line in summary.options:
            lines.append(f"{line.name}: {format_compact_currency(line.net_proceeds)}")
        lines.extend([
            "",
            f"Schedule Free Call: {self.config.contact_phone}",
            "Or text SCHEDULE to this number",
        ])
        return "\n".join(lines)

    def deliver(
        self,
        destination: str,
        comparison: ComparisonResult,
        attachment: Optional[bytes] = None,
    ) -> DeliveryOutcome:
        """
        Send the comparison text message.

        The attachment argument is accepted for a uniform adapter signature
        and ignored: SMS carries no attachment. Never raises.

        Returns:
            DeliveryOutcome describing the attempt
        """
        phone = destination
        summary = None
        try:
            phone = normalize_phone_number(destination)
            summary = summarize(comparison)
            payload = {
                "type": "SMS",
                "phone": phone,
                "message": self.build_message(comparison),
            }
            self.client.post_message(payload)
        except DeliveryFailure as exc:
            error = str(exc)
            logger.error("Comparison SMS to %s failed: %s", phone, exc)
            if exc.response_text:
                logger.error("Gateway response: %s", exc.response_text)
        except Exception as exc:
            error = f"{type(exc).__name__}: {exc}"
            logger.error(
                "Comparison SMS to %s failed unexpectedly: %s",
                phone,
                error,
                exc_info=True,
            )
        else:
            logger.info("Comparison SMS sent to %s", phone)
            return DeliveryOutcome(
                channel=DeliveryChannel.SMS,
                destination=phone,
                delivered=True,
            )

        logger.info(
            "Comparison SMS fallback - would send to %s: %s",
            phone,
            summary.describe() if summary else "summary unavailable",
        )
        return DeliveryOutcome(
            channel=DeliveryChannel.SMS,
            destination=phone,
            delivered=False,
            error=error,
        )
