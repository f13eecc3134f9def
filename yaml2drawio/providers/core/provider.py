#!/usr/bin/env python3
"""
Built-in ``core`` provider: the basic draw.io element kinds.
"""

from __future__ import annotations

from typing import Any, Dict, List

from yaml2drawio.diagram_types import ParamMap
from yaml2drawio.errors import ProviderError
from yaml2drawio.providers.core import connector, group, shape, swimlane, text
from yaml2drawio.providers.core.base import CoreResource
from yaml2drawio.providers.interface import Provider, ResourceDefinition
from yaml2drawio.schema.model import Element

CORE_VERSION = "1.0.0"


class CoreProvider(Provider):
    def __init__(self, version: str = CORE_VERSION) -> None:
        self._version = version
        # resource type -> handler; order is the listing order
        self._resources: Dict[str, CoreResource] = {
            "shape": shape.RESOURCE,
            "connector": connector.RESOURCE,
            "text": text.RESOURCE,
            "group": group.RESOURCE,
            "swimlane": swimlane.RESOURCE,
        }

    @property
    def name(self) -> str:
        return "core"

    @property
    def version(self) -> str:
        return self._version

    def resources(self) -> List[ResourceDefinition]:
        return [resource.definition for resource in self._resources.values()]

    def _resource(self, resource_type: str) -> CoreResource:
        resource = self._resources.get(resource_type)
        if resource is None:
            raise ProviderError(
                self.name, resource_type,
                f"unsupported resource type: {resource_type}",
                code="UNSUPPORTED_RESOURCE",
            )
        return resource

    def validate(self, resource_type: str, params: ParamMap) -> None:
        self._resource(resource_type).validate(params)

    def generate_template(self, resource_type: str, params: ParamMap) -> Element:
        resource = self._resource(resource_type)
        resource.validate(params)
        return resource.generate(params)

    def get_schema(self, resource_type: str) -> Dict[str, Any]:
        resource = self._resources.get(resource_type)
        if resource is None:
            raise ProviderError(
                self.name, resource_type,
                f"schema not found for resource type: {resource_type}",
                code="SCHEMA_NOT_FOUND",
            )
        return resource.definition.schema


__all__ = ["CoreProvider", "CORE_VERSION"]
