from django.db import models


class CartLine(models.Model):
    """
    A product saved in an account's cart.

    Lines are identified by product code (the item's barcode) and a code can
    appear at most once per account. Insertion order is the cart order.
    Lines are removed when the cart is cleared or flushed at checkout.
    """

    account = models.ForeignKey(
        "accounts.Account",
        on_delete=models.CASCADE,
        related_name="cart_lines",
    )
    product_code = models.BigIntegerField(
        help_text="Barcode of the product added to the cart",
    )
    added_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "cart_line"
        ordering = ["added_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["account", "product_code"],
                name="unique_product_code_per_cart",
            ),
        ]

    def __str__(self):
        return f"Cart line {self.product_code}"
