"""Domain layer: errors, schemas and constants."""

from .errors import ErrorCodes, TemplaterError
from .schemas import (
    Author,
    CreatedFile,
    RenderContext,
    Template,
)

__all__ = [
    "TemplaterError",
    "ErrorCodes",
    "Template",
    "RenderContext",
    "CreatedFile",
    "Author",
]
