from django.contrib import admin

from .models import Payout


@admin.register(Payout)
class PayoutAdmin(admin.ModelAdmin):
    list_display = ("affiliate", "period_start", "period_end", "revenue_cents", "commission_cents", "status")
    search_fields = ("affiliate__code",)
    list_filter = ("status",)
