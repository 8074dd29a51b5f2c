from .documents import (
    BaseDocument,
    DocumentError,
    StatDocument,
    parse_base_document,
    parse_stat_document,
    read_json,
)

__all__ = [
    "BaseDocument",
    "DocumentError",
    "StatDocument",
    "parse_base_document",
    "parse_stat_document",
    "read_json",
]
