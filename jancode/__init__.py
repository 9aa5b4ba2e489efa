"""
JAN / EAN barcode font encoder.
"""

from jancode.barcode import EncodeError, RejectionReason, encode

__all__ = ["EncodeError", "RejectionReason", "encode"]
