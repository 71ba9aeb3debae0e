"""Response entities."""

from typing import Any

from swagger_assembler.config import JSON_MEDIA_TYPE
from swagger_assembler.resolver import TypeSchemaResolver

NO_DESCRIPTION = "No description."


def build_response(
    resolver: TypeSchemaResolver,
    status_code: int,
    type_: Any = None,
    description: str | None = None,
    example: Any = None,
) -> dict:
    """Return ``{status_code: response}`` ready to be merged into an operation."""
    schema = resolver.resolve(type_) if type_ is not None else {}
    response: dict = {
        "description": description or NO_DESCRIPTION,
        "schema": schema or {},
    }
    if example is not None:
        response["examples"] = {JSON_MEDIA_TYPE: example}
    return {str(status_code): response}
