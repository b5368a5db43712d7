"""Column types shared by the ORM models and migrations."""
from uuid import UUID

from sqlalchemy import LargeBinary
from sqlalchemy.dialects import mysql
from sqlalchemy.types import TypeDecorator


class BinaryUUID(TypeDecorator):
    """UUID stored as its 16 raw bytes: BINARY(16) on MySQL, a 16-byte blob elsewhere."""

    impl = LargeBinary(16)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name in ("mysql", "mariadb"):
            return dialect.type_descriptor(mysql.BINARY(16))
        return dialect.type_descriptor(LargeBinary(16))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, UUID):
            value = UUID(str(value))
        return value.bytes

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return UUID(bytes=bytes(value))
