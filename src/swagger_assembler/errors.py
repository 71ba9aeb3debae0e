"""Errors raised while assembling a document.

Every error is fatal: the first one aborts the run and no document is produced.
"""


class SwaggerAssemblerError(Exception):
    """Base class for all assembly errors."""


class StructuralMisuseError(SwaggerAssemblerError):
    """An annotation was used where it is not allowed."""


class DuplicateDefinitionError(SwaggerAssemblerError):
    """The same verb was registered twice on one path."""


class ContractViolationError(SwaggerAssemblerError):
    """A declared type breaks a location or return-type constraint."""


class MissingCorrespondenceError(SwaggerAssemblerError):
    """A path parameter has no matching placeholder in the path."""


class PreconditionError(SwaggerAssemblerError):
    """A post-processing step ran before anything it depends on."""
