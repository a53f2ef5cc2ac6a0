"""
Shared model helpers
"""

from datetime import datetime, timezone

# Largest value a SQLite INTEGER primary key can hold
MAX_ID = 2 ** 63 - 1


def utcnow():
    """Naive UTC timestamp, comparable with values read back from the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def camel(name):
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


class SerializerMixin:
    """Render a row as a camelCase JSON object."""

    __hidden_fields__ = ()

    def to_dict(self):
        data = {}
        for column in self.__table__.columns:
            if column.name in self.__hidden_fields__:
                continue
            value = getattr(self, column.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            data[camel(column.name)] = value
        return data
