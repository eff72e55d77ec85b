"""
Delivery dispatcher.

Runs the email and SMS channels for one comparison. The two sends are
independent and order-insensitive, so they run side by side.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from core.models import ComparisonResult

from .email_adapter import EmailDeliveryAdapter
from .results import DeliveryReceipt
from .sms_adapter import SmsDeliveryAdapter


logger = logging.getLogger(__name__)


def dispatch_comparison(
    comparison: ComparisonResult,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    attachment: Optional[bytes] = None,
    attachment_name: Optional[str] = None,
    email_adapter: Optional[EmailDeliveryAdapter] = None,
    sms_adapter: Optional[SmsDeliveryAdapter] = None,
) -> DeliveryReceipt:
    """
    Deliver a comparison over every channel with a destination.

    Args:
        comparison: Comparison to deliver
        email: Gateway contact id for the email channel (skipped if None)
        phone: Phone number for the SMS channel (skipped if None)
        attachment: Rendered PDF for the email channel
        attachment_name: Filename for the attachment
        email_adapter: Adapter override (defaults to a new EmailDeliveryAdapter)
        sms_adapter: Adapter override (defaults to a new SmsDeliveryAdapter)

    Returns:
        DeliveryReceipt with one outcome per attempted channel
    """
    if not email and not phone:
        return DeliveryReceipt()

    with ThreadPoolExecutor(max_workers=2) as executor:
        futures = []
        if email:
            adapter = email_adapter or EmailDeliveryAdapter()
            futures.append(executor.submit(
                adapter.deliver, email, comparison, attachment, attachment_name,
            ))
        if phone:
            adapter = sms_adapter or SmsDeliveryAdapter()
            futures.append(executor.submit(adapter.deliver, phone, comparison))

        outcomes = [future.result() for future in futures]

    receipt = DeliveryReceipt(outcomes=outcomes)
    if not receipt.all_delivered:
        logger.warning(
            "Comparison delivery incomplete: %s",
            ", ".join(
                f"{o.channel.value}={'ok' if o.delivered else 'failed'}" for o in outcomes
            ),
        )
    return receipt
