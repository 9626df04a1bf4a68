"""Alias resolution for heterogeneously named source documents."""

import uuid
from typing import Any, Callable, Mapping, Optional

_MISSING = object()


def pick(
    raw: Mapping[str, Any],
    *names: str,
    default: Any = None,
    default_factory: Optional[Callable[[], Any]] = None,
) -> Any:
    """Return the value of the first alias present in ``raw``.

    A key counts as present even when its value is ``None``, ``""`` or ``0``;
    only missing keys are skipped. When no alias is present the default (or
    the result of ``default_factory``) is returned.
    """
    for name in names:
        value = raw.get(name, _MISSING)
        if value is not _MISSING:
            return value
    if default_factory is not None:
        return default_factory()
    return default


def as_text(value: Any) -> Optional[str]:
    """Coerce a scalar JSON value to text, keeping None as None."""
    if value is None or isinstance(value, str):
        return value
    return str(value)


def new_asset_id() -> str:
    """Generate a display-only identifier for assets that carry none."""
    return f"asset-{uuid.uuid4().hex[:6]}"
