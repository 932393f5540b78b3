"""
Core backend base components.

Foundational serializer classes shared by every app so API payloads use the
same camelCase conventions.
"""

from .serializers import BaseModelSerializer, TimestampedSerializer

__all__ = [
    'BaseModelSerializer',
    'TimestampedSerializer',
]
