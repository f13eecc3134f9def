#!/usr/bin/env python3
"""
Provider registry.

One registry instance is built at startup and handed to whatever needs to
resolve providers. Registration takes the write side of a read-write lock;
lookups, validation and generation only take the read side, so they can
run from several threads at once.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from yaml2drawio.diagram_types import ParamMap, ProviderType
from yaml2drawio.errors import ProviderError, ProviderNotFoundError, ValidationError
from yaml2drawio.providers.interface import Provider, ResourceDefinition
from yaml2drawio.schema.model import Element, ProviderRef

logger = logging.getLogger(__name__)

# Resource type tokens recognised when splitting "provider-resource" strings.
# vpc/organization belong to the cloud provider, which is not bundled.
KNOWN_RESOURCE_TYPES = frozenset({
    "text", "shape", "group", "swimlane", "connector",
    "vpc", "organization",
})

PROVIDER_SOURCE_MARKER = "yaml2drawio-provider-"


class ReadWriteLock:
    """Many readers or one writer.

    A waiting writer blocks new readers, so a steady stream of readers
    cannot starve it. A reader must not re-acquire while holding.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


@dataclass(frozen=True)
class RegistryEntry:
    provider: Provider
    builtin: bool = False


def split_resource_reference(reference: str) -> Tuple[str, str]:
    """Split ``"provider-resource"`` into its two parts.

    Scans tokens from the end for a known resource type, so
    ``"custom-core-shape"`` gives ``("custom-core", "shape")``. Without a
    known type the last token is the resource. A provider whose own name
    ends in a known type token (``"my-text-shape"``) is ambiguous; the
    rightmost known token always wins.
    """
    parts = reference.split("-")
    provider = resource = ""
    if len(parts) >= 2:
        provider, resource = "-".join(parts[:-1]), parts[-1]
        for i in range(len(parts) - 1, 0, -1):
            if parts[i] in KNOWN_RESOURCE_TYPES:
                provider, resource = "-".join(parts[:i]), parts[i]
                break

    if not provider or not resource:
        raise ValidationError(
            "resource",
            f"invalid resource format {reference!r}, expected 'provider-resource'",
            code="INVALID_FORMAT",
        )
    return provider, resource


def registry_name_for(declared: str, ref: Optional[ProviderRef]) -> str:
    """``acme/yaml2drawio-provider-core`` declares the ``core`` provider."""
    if ref is not None and PROVIDER_SOURCE_MARKER in ref.source:
        name = ref.source.split(PROVIDER_SOURCE_MARKER, 1)[1]
        if name:
            return name
    return declared


class ProviderRegistry:
    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._entries: Dict[str, RegistryEntry] = {}

    # ===============================================
    # REGISTRATION
    # ===============================================

    def register(self, provider: Provider, builtin: bool = False) -> None:
        name = provider.name
        if not name:
            raise ProviderError("", "", "provider name cannot be empty", code="INVALID_PROVIDER")
        with self._lock.write():
            if name in self._entries:
                raise ProviderError(name, "", f"provider {name} is already registered", code="DUPLICATE_PROVIDER")
            self._entries[name] = RegistryEntry(provider=provider, builtin=builtin)
        logger.debug("Registered provider %s %s (builtin=%s)", name, provider.version, builtin)

    def unregister(self, name: str) -> None:
        with self._lock.write():
            if name not in self._entries:
                raise ProviderNotFoundError(name, name)
            del self._entries[name]

    # ===============================================
    # LOOKUP
    # ===============================================

    def get(self, name: str) -> Provider:
        with self._lock.read():
            entry = self._entries.get(name)
        if entry is None:
            raise ProviderNotFoundError(name, name)
        return entry.provider

    def is_builtin(self, name: str) -> bool:
        with self._lock.read():
            entry = self._entries.get(name)
        return entry is not None and entry.builtin

    def list(self) -> List[str]:
        with self._lock.read():
            return sorted(self._entries)

    def get_all(self) -> Dict[str, Provider]:
        with self._lock.read():
            return {name: entry.provider for name, entry in self._entries.items()}

    def resource_types(self) -> Dict[str, ResourceDefinition]:
        """All resources keyed ``"<provider>-<type>"``."""
        with self._lock.read():
            providers = [entry.provider for entry in self._entries.values()]
        resources: Dict[str, ResourceDefinition] = {}
        for provider in providers:
            for definition in provider.resources():
                resources[f"{provider.name}-{definition.type}"] = definition
        return resources

    def resources_by_provider(self, name: str) -> List[ResourceDefinition]:
        return self.get(name).resources()

    def resolve(self, declared: str, ref: Optional[ProviderRef] = None, reference: str = "") -> Provider:
        """Find the provider for a declared name, honouring the ref's type.

        ``builtin`` refs only accept built-in entries; ``registry`` refs
        (the default) accept any entry.
        """
        name = registry_name_for(declared, ref)
        preferred = ref.type if ref is not None and ref.type else ProviderType.REGISTRY.value
        with self._lock.read():
            entry = self._entries.get(name)
        if entry is None or (preferred == ProviderType.BUILTIN.value and not entry.builtin):
            raise ProviderNotFoundError(reference or declared, name)
        logger.debug("Resolved provider %s -> %s (%s)", declared, name, preferred)
        return entry.provider

    # ===============================================
    # DELEGATION
    # ===============================================

    def validate_resource(self, provider_name: str, resource_type: str, params: ParamMap) -> None:
        self.get(provider_name).validate(resource_type, params)

    def generate(self, provider_name: str, resource_type: str, params: ParamMap) -> Element:
        return self.get(provider_name).generate_template(resource_type, params)


__all__ = [
    "KNOWN_RESOURCE_TYPES",
    "ReadWriteLock",
    "RegistryEntry",
    "ProviderRegistry",
    "split_resource_reference",
    "registry_name_for",
]
