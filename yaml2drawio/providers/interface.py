#!/usr/bin/env python3
"""
Provider contract.

A provider is a named generator of diagram elements. It lists the resource
types it supports, validates parameters for one of them and turns those
parameters into an Element. The pipeline only ever talks to this contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List

from yaml2drawio.diagram_types import ParamMap
from yaml2drawio.schema.model import Element


@dataclass(frozen=True)
class ResourceExample:
    name: str
    description: str = ""
    config: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ResourceDefinition:
    type: str
    name: str
    description: str = ""
    category: str = ""
    schema: Dict[str, Any] = field(default_factory=dict)
    examples: List[ResourceExample] = field(default_factory=list)


class Provider(ABC):

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry name, e.g. ``core``."""

    @property
    @abstractmethod
    def version(self) -> str:
        ...

    @abstractmethod
    def resources(self) -> List[ResourceDefinition]:
        ...

    @abstractmethod
    def validate(self, resource_type: str, params: ParamMap) -> None:
        """Raise ValidationError or ProviderError when ``params`` are unusable."""

    @abstractmethod
    def generate_template(self, resource_type: str, params: ParamMap) -> Element:
        ...

    @abstractmethod
    def get_schema(self, resource_type: str) -> Dict[str, Any]:
        ...


__all__ = ["ResourceExample", "ResourceDefinition", "Provider"]
