"""JSON encoding used by the structured log formatter."""

from typing import Any

import msgspec

__all__ = ("encode_json",)

_encoder = msgspec.json.Encoder(enc_hook=str)


def encode_json(data: Any) -> str:
    """Encode ``data`` as a JSON string.

    Values msgspec cannot encode natively are converted with :func:`str`.

    Returns:
        The JSON document.
    """
    return _encoder.encode(data).decode("utf-8")
