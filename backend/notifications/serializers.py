from rest_framework import serializers


class SendSMSSerializer(serializers.Serializer):
    phoneNumber = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)
    mssg = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
