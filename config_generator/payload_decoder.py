"""
Payload Decoder Module

Decodes inbound JSON payloads into configuration trees.
"""

import json
import math
from pathlib import Path
from typing import Union

from .errors import DecodeError, TypeMismatch
from .tree import Mapping, from_plain


def decode_payload(data: Union[bytes, str]) -> Mapping:
    """Decode a JSON object payload

    Args:
        data: Raw request body or file content

    Returns:
        Mapping holding the decoded configuration

    Raises:
        DecodeError: If data is not valid UTF-8 JSON or not a JSON object
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            data = data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeError(f"Payload is not valid UTF-8: {e}") from e

    if not data.strip():
        raise DecodeError("Payload is empty")

    try:
        obj = json.loads(data, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON payload: {e}") from e

    if not isinstance(obj, dict):
        raise DecodeError(f"Payload must be a JSON object, got {type(obj).__name__}")

    try:
        return from_plain(obj)
    except TypeMismatch as e:
        raise DecodeError(str(e)) from e


def read_payload_file(file_path: Path) -> Mapping:
    """Read and decode a JSON configuration file

    Raises:
        FileNotFoundError: If file does not exist
        DecodeError: If the file content is not a JSON object
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")
    with open(file_path, 'rb') as f:
        return decode_payload(f.read())


def _reject_constant(token: str):
    # NaN, Infinity and -Infinity are accepted by json.loads but are not JSON
    raise DecodeError(f"Invalid JSON payload: '{token}' is not a JSON value")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise DecodeError(f"Invalid JSON payload: number {literal} is out of range")
    return value
