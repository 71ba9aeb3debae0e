"""Per-run builder context."""

import logging
from dataclasses import dataclass, field

from swagger_assembler.config import BuilderOptions, default_document, load_base_document

logger = logging.getLogger(__name__)


@dataclass
class BuilderState:
    """Mutable context threaded through every builder call of one run."""

    document: dict
    current_path: str | None = None
    current_path_template: str | None = None
    current_operation: dict | None = None
    pending_operations: list[dict] = field(default_factory=list)


def create_state(options: BuilderOptions | None = None) -> BuilderState:
    """Create the document and state for a new run.

    The base document, if any, is merged over the defaults at top level only.
    """
    options = options or BuilderOptions()
    document = default_document(options)
    if options.base_document:
        logger.debug("Merging base document %s", options.base_document)
        document = {**document, **load_base_document(options.base_document)}
    document["paths"] = {}
    return BuilderState(document=document)
