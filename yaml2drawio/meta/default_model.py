from .drawio_meta import DrawioMetaModel


DEFAULT_META = DrawioMetaModel()
