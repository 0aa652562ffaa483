"""Signing – flatten request bodies into the string map signers consume."""
from __future__ import annotations

import json
from urllib.parse import parse_qsl

from gateway_auth.kernel.errors import MalformedRequestError


def json_parameters(body: bytes) -> dict[str, str]:
    """Top-level scalar fields of a JSON object, as text.

    Numbers keep their wire text so the signed representation is untouched.
    Booleans become ``true``/``false``; nulls and nested values are dropped.
    """
    try:
        data = json.loads(body, parse_float=str, parse_int=str)
    except ValueError as exc:
        raise MalformedRequestError("Body is not valid JSON") from exc
    if not isinstance(data, dict):
        raise MalformedRequestError("Body must be a JSON object")

    params: dict[str, str] = {}
    for key, value in data.items():
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        elif isinstance(value, str):
            params[key] = value
    return params


def form_parameters(body: bytes) -> dict[str, str]:
    """Fields of an ``application/x-www-form-urlencoded`` body; last one wins."""
    return dict(parse_qsl(body.decode("utf-8"), keep_blank_values=True))


__all__ = ["form_parameters", "json_parameters"]
