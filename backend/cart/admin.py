from django.contrib import admin

from .models import CartLine


@admin.register(CartLine)
class CartLineAdmin(admin.ModelAdmin):
    list_display = ("product_code", "account", "added_at")
    search_fields = ("product_code", "account__identity_id")
    raw_id_fields = ("account",)
