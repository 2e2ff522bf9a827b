"""Canonical HMAC-SHA256 signing shared by payment requests and webhooks.

The canonical string is ``key=value`` pairs joined by ``&`` in ascending key
order. The provider computes the same string on its side, so the value
rendering below must stay bit-exact with it.
"""

import hashlib
import hmac
import json
import logging
import math
from collections.abc import Mapping
from typing import Any

from shared.errors import ConfigurationError

logger = logging.getLogger(__name__)

PAYMENT_SIGNATURE_FIELDS = ("amount", "cancelUrl", "description", "orderCode", "returnUrl")

_EMPTY_MARKERS = ("null", "undefined")

OBJECT_PLACEHOLDER = "[object Object]"


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


# Marks a field as absent. Such keys are dropped from the canonical string,
# unlike None which contributes an empty value.
UNSET: Any = _Unset()


def sort_object_by_key(obj: Mapping[str, Any]) -> list[tuple[str, Any]]:
    return [(key, obj[key]) for key in sorted(obj)]


def _sorted_element(item: Any) -> Any:
    if isinstance(item, Mapping):
        return dict(sort_object_by_key(item))
    if item is None:
        return None
    if isinstance(item, str | list | tuple):
        # Strings and arrays spread into index-keyed objects.
        return {str(index): part for index, part in enumerate(item)}
    return {}


def _json_ready(value: Any) -> Any:
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer() and abs(value) < 1e21:
            return int(value)
        return value
    if isinstance(value, Mapping):
        return {key: _json_ready(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_json_ready(item) for item in value]
    return value


def _dump_json(value: Any) -> str:
    return json.dumps(_json_ready(value), separators=(",", ":"), ensure_ascii=False)


def _expand_exponent(mantissa: str, power: int) -> str:
    sign = "-" if mantissa.startswith("-") else ""
    digits = mantissa.lstrip("-").replace(".", "")
    return f"{sign}0.{'0' * (-power - 1)}{digits}"


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    # Decimal notation down to 1e-6, exponent notation without padding below.
    if -6 <= power < 0:
        return _expand_exponent(mantissa, power)
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def _canonical_value(value: Any) -> str:
    if isinstance(value, list | tuple):
        value = _dump_json([_sorted_element(item) for item in value])

    if value is None or value in _EMPTY_MARKERS:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return _format_number(value)
    if isinstance(value, Mapping):
        return OBJECT_PLACEHOLDER
    return str(value)


def canonical_query_string(payload: Mapping[str, Any]) -> str:
    return "&".join(
        f"{key}={_canonical_value(value)}"
        for key, value in sort_object_by_key(payload)
        if value is not UNSET
    )


def create_signature(payload: Mapping[str, Any], checksum_key: str | None) -> str:
    if not checksum_key:
        raise ConfigurationError("Checksum key is required")

    data = canonical_query_string(payload)
    logger.debug(f"Data for signature: {data}")

    return hmac.new(
        checksum_key.encode("utf-8"),
        data.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def create_payment_signature(payment: Mapping[str, Any], checksum_key: str | None) -> str:
    fields = {name: payment.get(name, UNSET) for name in PAYMENT_SIGNATURE_FIELDS}
    return create_signature(fields, checksum_key)


def verify_signature(data: Mapping[str, Any], signature: str, checksum_key: str | None) -> bool:
    expected = create_signature(data, checksum_key)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
