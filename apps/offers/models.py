import uuid

from django.db import models


class Offer(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    destination_url = models.URLField(max_length=2048)
    active = models.BooleanField(default=True)
    # Percentage of conversion revenue paid to the affiliate.
    commission_rate = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "offers"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
