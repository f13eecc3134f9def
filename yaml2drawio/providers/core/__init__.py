from .provider import CoreProvider, CORE_VERSION

__all__ = ["CoreProvider", "CORE_VERSION"]
