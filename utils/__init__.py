"""Shared utilities for the backend."""
from utils.case import row_to_response, to_camel_key

__all__ = [
    "to_camel_key",
    "row_to_response",
]
