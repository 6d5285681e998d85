from rule_docgen.repositories.documents import DocumentRepository
from rule_docgen.repositories.options import OptionsRepository
from rule_docgen.repositories.plugin import PluginRepository

__all__ = [
    "DocumentRepository",
    "OptionsRepository",
    "PluginRepository",
]
