"""Security requirements on operations."""

import logging
from collections.abc import Sequence
from typing import Any

from swagger_assembler.config import DEFAULT_SECURITY_PROPERTY

logger = logging.getLogger(__name__)


def normalize_scopes(scopes: Any) -> list[str]:
    """Accept a sequence of scope strings; anything else means no scopes."""
    if isinstance(scopes, Sequence) and not isinstance(scopes, (str, bytes)):
        return [str(scope) for scope in scopes]
    return []


def add_security(
    operation: dict,
    scheme: str,
    scopes: Any = None,
    destination: str | None = None,
    default_property: str = DEFAULT_SECURITY_PROPERTY,
) -> None:
    """Append ``{scheme: scopes}`` under ``destination`` on the operation.

    A custom destination also lists the scheme, without scopes, under the
    default property so that every referenced scheme appears there.
    """
    destination = destination or default_property
    resolved_scopes = normalize_scopes(scopes)
    operation.setdefault(destination, []).append({scheme: resolved_scopes})
    if destination.lower() != default_property.lower():
        operation.setdefault(default_property, []).append({scheme: []})
    logger.debug("Security %s%s added under %s", scheme, resolved_scopes, destination)
