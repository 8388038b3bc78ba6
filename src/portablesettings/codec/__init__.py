"""Conversion between logical names/values and document nodes."""

from portablesettings.codec.names import decode_name, encode_local_name, is_valid_local_name
from portablesettings.codec.values import decode_value, encode_value

__all__ = [
    "decode_name",
    "decode_value",
    "encode_local_name",
    "encode_value",
    "is_valid_local_name",
]
