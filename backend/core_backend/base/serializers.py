from rest_framework import serializers


class BaseModelSerializer(serializers.ModelSerializer):
    """
    Base serializer that provides common functionality.

    Features:
    - Query optimization hints declared on Meta
    - Common validation hook

    Usage:
        class OrderSerializer(BaseModelSerializer):
            class Meta:
                model = Order
                fields = [...]
                prefetch_related_fields = ['cart_lines']
    """

    class Meta:
        select_related_fields = []
        prefetch_related_fields = []

    @classmethod
    def optimize_queryset(cls, queryset):
        """
        Apply the serializer's select/prefetch hints to ``queryset``.
        """
        meta = getattr(cls, 'Meta', None)
        select_fields = getattr(meta, 'select_related_fields', None)
        prefetch_fields = getattr(meta, 'prefetch_related_fields', None)
        if select_fields:
            queryset = queryset.select_related(*select_fields)
        if prefetch_fields:
            queryset = queryset.prefetch_related(*prefetch_fields)
        return queryset

    def validate(self, data):
        """
        Base validation that can be extended by child classes.
        """
        return super().validate(data)


class TimestampedSerializer(BaseModelSerializer):
    """
    Base serializer for models with created_at/updated_at fields.
    Exposes them under the client's camelCase names.
    """

    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
