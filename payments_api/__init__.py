"""
Adapters around paycore: HTTP endpoint, payload validation, configuration,
account snapshot loading and reporting.
"""

from payments_api.app import create_app
from payments_api.data_loader import load_csv, load_dataframe
from payments_api.payload import InvalidPayloadError, PaymentRequest, validate_payload
from payments_api.report import accounts_frame, print_report
from payments_api.settings import Settings, configure_logging

__all__ = [
    "create_app",
    "load_csv",
    "load_dataframe",
    "InvalidPayloadError",
    "PaymentRequest",
    "validate_payload",
    "accounts_frame",
    "print_report",
    "Settings",
    "configure_logging",
]
