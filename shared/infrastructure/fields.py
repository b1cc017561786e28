"""
Custom Django model fields.

Provides JSONListField which stores a list (participants, basecamp
facilities) as JSON text and hands it back to Python as a list, and
generate_key for the string primary keys used by catalog and booking rows.
"""

import json
import uuid

import structlog
from django.core.exceptions import ValidationError
from django.db import models

logger = structlog.get_logger(__name__)


def generate_key() -> str:
    """Opaque string primary key for catalog items and bookings."""
    return uuid.uuid4().hex


class JSONListField(models.TextField):
    """
    TextField holding a JSON-encoded list.

    Rows written by older clients may contain text that is not valid JSON;
    those load as an empty list and are logged.
    """

    description = "JSON-encoded list"

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('default', list)
        kwargs.setdefault('blank', True)
        super().__init__(*args, **kwargs)

    def from_db_value(self, value, expression, connection):
        """Decode when loading from database."""
        if value is None or value == '':
            return []
        try:
            decoded = json.loads(value)
        except (TypeError, ValueError):
            logger.warning("fields.json_list.decode_failed", column=self.name)
            return []
        return decoded if isinstance(decoded, list) else []

    def get_prep_value(self, value):
        """Encode before saving to database."""
        if value is None:
            return '[]'
        if isinstance(value, str):
            return value
        return json.dumps(list(value), ensure_ascii=False)

    def to_python(self, value):
        """Convert to a Python list."""
        if value is None or value == '':
            return []
        if isinstance(value, list):
            return value
        if isinstance(value, tuple):
            return list(value)
        try:
            decoded = json.loads(value)
        except (TypeError, ValueError):
            raise ValidationError("Enter a valid JSON list.", code='invalid')
        if not isinstance(decoded, list):
            raise ValidationError("Enter a valid JSON list.", code='invalid')
        return decoded

    def value_to_string(self, obj):
        return self.get_prep_value(self.value_from_object(obj))
