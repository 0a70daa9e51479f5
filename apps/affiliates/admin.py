from django.contrib import admin

from .models import Affiliate, Link


@admin.register(Affiliate)
class AffiliateAdmin(admin.ModelAdmin):
    list_display = ("code", "user", "created_at")
    search_fields = ("code", "user__email")


@admin.register(Link)
class LinkAdmin(admin.ModelAdmin):
    list_display = ("short_code", "name", "affiliate", "offer", "created_at")
    search_fields = ("short_code", "name", "affiliate__code", "offer__slug")
    list_filter = ("offer",)
