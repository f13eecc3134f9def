from .expressions import render
from .store import TemplateStore, template_key, read_template
from .processor import TemplateProcessor, substitute_variables

__all__ = [
    "render",
    "TemplateStore",
    "template_key",
    "read_template",
    "TemplateProcessor",
    "substitute_variables",
]
