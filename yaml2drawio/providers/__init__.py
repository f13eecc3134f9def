from .interface import Provider, ResourceDefinition, ResourceExample
from .registry import ProviderRegistry, ReadWriteLock, split_resource_reference, KNOWN_RESOURCE_TYPES
from .builtin import register_builtin_providers, builtin_provider_names

__all__ = [
    "Provider",
    "ResourceDefinition",
    "ResourceExample",
    "ProviderRegistry",
    "ReadWriteLock",
    "split_resource_reference",
    "KNOWN_RESOURCE_TYPES",
    "register_builtin_providers",
    "builtin_provider_names",
]
