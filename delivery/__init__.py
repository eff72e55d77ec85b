"""
Delivery module for the sale options engine.

Pushes a comparison to the requester over two independent channels:
- Email with the PDF report attached
- SMS with a condensed summary

Delivery is best effort: adapters log failures and return an outcome,
they never raise to the caller.
"""

from .gateway import GatewayClient
from .results import DeliveryChannel, DeliveryOutcome, DeliveryReceipt
from .summary import ComparisonSummary, OptionLine, summarize
from .email_adapter import EmailDeliveryAdapter
from .sms_adapter import SmsDeliveryAdapter, is_valid_phone_number, normalize_phone_number
from .dispatch import dispatch_comparison

__all__ = [
    "GatewayClient",
    "DeliveryChannel",
    "DeliveryOutcome",
    "DeliveryReceipt",
    "ComparisonSummary",
    "OptionLine",
    "summarize",
    "EmailDeliveryAdapter",
    "SmsDeliveryAdapter",
    "normalize_phone_number",
    "is_valid_phone_number",
    "dispatch_comparison",
]
