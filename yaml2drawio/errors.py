#!/usr/bin/env python3
"""
Error taxonomy for yaml2drawio.

Every error carries a context chain. Code that lets an error cross a page,
layer or element boundary prepends a segment with ``add_context`` and
re-raises the same object, so ``str(err)`` reads as a wrapped chain
(``page p1: element Box: <message>``) while the exception class stays
catchable.
"""

from __future__ import annotations

from typing import List, Optional, Sequence


class DiagramError(Exception):
    """Base class for all pipeline failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.context: List[str] = []

    def add_context(self, segment: str) -> "DiagramError":
        self.context.insert(0, segment)
        return self

    def __str__(self) -> str:
        return ": ".join(self.context + [self.message])


class ValidationError(DiagramError):
    """A field or parameter failed a declared constraint."""

    def __init__(self, field: str, message: str, code: str = "INVALID_VALUE") -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.detail = message
        self.code = code


class TemplateLoadError(DiagramError):
    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"failed to load template {path}: {message}")
        self.path = path


class TemplateNotFoundError(DiagramError):
    def __init__(self, reference: str, resolved: str, element: str = "") -> None:
        target = f" for element {element}" if element else ""
        super().__init__(f"template {reference} not found{target} (resolved to: {resolved})")
        self.reference = reference
        self.resolved = resolved
        self.element = element


class ProviderNotFoundError(DiagramError):
    def __init__(self, reference: str, provider: str) -> None:
        super().__init__(f"provider {provider} not found (resource reference: {reference})")
        self.reference = reference
        self.provider = provider


class ProviderError(DiagramError):
    """Provider-specific failure, e.g. an unsupported resource type."""

    def __init__(self, provider: str, resource: str, message: str, code: str = "PROVIDER_ERROR") -> None:
        super().__init__(f"provider {provider}: {message}")
        self.provider = provider
        self.resource = resource
        self.code = code


class DependencyUnsatisfiedError(DiagramError):
    def __init__(self, element: str, template: str, required_type: str,
                 relationship: str, ancestors: Sequence[str]) -> None:
        chain = ", ".join(ancestors) if ancestors else "none"
        super().__init__(
            f"required {relationship} dependency not satisfied: template {template} requires "
            f"a {relationship} of type {required_type}, but element {element} has ancestors: [{chain}]"
        )
        self.element = element
        self.template = template
        self.required_type = required_type
        self.relationship = relationship
        self.ancestors = list(ancestors)


class MissingParameterError(DiagramError):
    def __init__(self, template: str, parameter: str) -> None:
        super().__init__(f"required template parameter {parameter} not provided for template {template}")
        self.template = template
        self.parameter = parameter


class UnsupportedElementTypeError(DiagramError):
    def __init__(self, element: str, element_type: str) -> None:
        super().__init__(f"unsupported element type {element_type!r} for element {element}")
        self.element = element
        self.element_type = element_type


class StructuralInvariantError(DiagramError):
    """Id/name presence rule violated or duplicate page id."""

    def __init__(self, message: str, element: Optional[str] = None) -> None:
        super().__init__(f"{message} ({element})" if element else message)
        self.element = element


class ExpressionError(DiagramError):
    def __init__(self, expression: str, message: str) -> None:
        super().__init__(f"invalid expression {expression!r}: {message}")
        self.expression = expression


__all__ = [
    "DiagramError",
    "ValidationError",
    "TemplateLoadError",
    "TemplateNotFoundError",
    "ProviderNotFoundError",
    "ProviderError",
    "DependencyUnsatisfiedError",
    "MissingParameterError",
    "UnsupportedElementTypeError",
    "StructuralInvariantError",
    "ExpressionError",
]
