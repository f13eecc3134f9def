from .drawio_meta import DrawioMetaModel, GraphModelDefaults
from .default_model import DEFAULT_META

__all__ = [
    "DrawioMetaModel",
    "GraphModelDefaults",
    "DEFAULT_META",
]
