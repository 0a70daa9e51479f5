import uuid

from django.db import models


class Affiliate(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.SlugField(max_length=50, unique=True)
    user = models.OneToOneField(
        "authentication.User",
        on_delete=models.CASCADE,
        related_name="affiliate",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "affiliates"

    def __str__(self) -> str:
        return self.code


class Link(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    affiliate = models.ForeignKey(
        Affiliate,
        on_delete=models.CASCADE,
        related_name="links",
    )
    offer = models.ForeignKey(
        "offers.Offer",
        on_delete=models.CASCADE,
        related_name="links",
    )
    # Public routing key, matched case-sensitively.
    short_code = models.CharField(max_length=32, unique=True)
    name = models.CharField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "links"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.offer.slug} - {self.short_code}"
