"""
Column types shared by the models.
"""
from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.types import TypeDecorator


class TagListType(TypeDecorator):
    """
    Custom type for label sets (skin tones, occasion tags, id lists).
    Uses ARRAY(String) on PostgreSQL for better performance.
    Falls back to JSON on SQLite/other databases for compatibility.
    """
    impl = JSON  # Default implementation
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(ARRAY(String(50)))
        return dialect.type_descriptor(JSON())

    def process_bind_param(self, value, dialect):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return [str(v) for v in value]

    def process_result_value(self, value, dialect):
        # Both ARRAY and JSON return list-like objects
        return list(value) if value else []
