from __future__ import annotations

import logging
from typing import List, Optional

from yaml2drawio.providers.core import CoreProvider
from yaml2drawio.providers.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def builtin_provider_names() -> List[str]:
    return ["core"]


def register_builtin_providers(registry: ProviderRegistry, version: Optional[str] = None) -> None:
    """Register every bundled provider as built-in."""
    provider = CoreProvider(version) if version else CoreProvider()
    registry.register(provider, builtin=True)
    logger.debug("Built-in providers registered: %s", ", ".join(builtin_provider_names()))


__all__ = ["builtin_provider_names", "register_builtin_providers"]
