from django.urls import path
from .views import SendSMSView

# Mounted under "api/"
urlpatterns = [
    path("sendSms", SendSMSView.as_view(), name="send-sms"),
]
