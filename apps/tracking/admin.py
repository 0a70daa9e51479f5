from django.contrib import admin

from .models import Click, Conversion


@admin.register(Click)
class ClickAdmin(admin.ModelAdmin):
    list_display = ("link", "session_id", "device", "ip", "utm_source", "clicked_at")
    search_fields = ("session_id", "ip", "link__short_code", "utm_campaign", "subid")
    list_filter = ("device",)
    readonly_fields = [field.name for field in Click._meta.fields]


@admin.register(Conversion)
class ConversionAdmin(admin.ModelAdmin):
    list_display = ("link", "session_id", "revenue_cents", "currency", "external_order_id", "created_at")
    search_fields = ("session_id", "external_order_id", "link__short_code")
    list_filter = ("currency",)
    readonly_fields = [field.name for field in Conversion._meta.fields]
