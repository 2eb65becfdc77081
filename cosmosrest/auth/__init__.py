"""Request authentication."""

from .signer import MasterKeySigner, format_http_date, string_to_sign

__all__ = ["MasterKeySigner", "format_http_date", "string_to_sign"]
