"""Parameter entities.

Non-body parameters must resolve to a primitive scalar; body parameters
carry their full schema.
"""

import json
import logging
from typing import Any

from swagger_assembler.builder.state import BuilderState
from swagger_assembler.errors import ContractViolationError, MissingCorrespondenceError
from swagger_assembler.resolver import TypeSchemaResolver

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description."
SCALAR_LOCATIONS = ("header", "path", "query")
# integer is JSON Schema's refinement of number
PRIMITIVE_TYPES = ("string", "boolean", "number", "integer")


def build_parameter(
    state: BuilderState,
    resolver: TypeSchemaResolver,
    location: str,
    name: str,
    type_: Any = None,
    description: str | None = None,
    required: bool = True,
) -> dict:
    """Build one Swagger parameter object."""
    template = state.current_path_template
    if location == "path" and (not template or f"{{{name}}}" not in template):
        raise MissingCorrespondenceError(f"Unable to find matching parameter in path for parameter {name}")

    schema = resolver.resolve(type_)
    is_any = schema == {}
    result: dict = {
        "in": location,
        "name": name,
        "required": required,
        "description": description or NO_DESCRIPTION,
    }
    if location in SCALAR_LOCATIONS:
        logger.debug("Processing %s parameter: pending result %s, schema %s", location, json.dumps(result), json.dumps(schema))
        if not is_any and schema.get("type") not in PRIMITIVE_TYPES:
            raise ContractViolationError(
                "Path/Query/Header decorators must be associated with parameters that have a primitive type."
            )
        result["type"] = {} if is_any else schema["type"]
    else:
        result["schema"] = schema
    return result


def parameter_name(kind: str, explicit: str | None, declared: str) -> str:
    """Body parameters are always named 'body'; others fall back to the declared name."""
    if kind == "body":
        return "body"
    return explicit or declared
