from django.contrib import admin
from django.urls import include, path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

schema_view = get_schema_view(
    openapi.Info(title="Affiliate Dashboard API", default_version="v1"),
    public=True,
    permission_classes=[permissions.AllowAny],
)

urlpatterns = [
    path("admin/", admin.site.urls),
    # Public tracking endpoints: redirects, pixel and server-to-server conversions
    path("", include(("apps.tracking.urls", "tracking"))),
    path("api/", include(("apps.tracking.urls", "tracking"), namespace="tracking-api")),
    path("api/auth/", include("apps.authentication.urls")),
    path("api/offers/", include("apps.offers.urls")),
    path("api/links/", include("apps.affiliates.urls")),
    path("api/analytics/", include("apps.analytics.urls")),
    path("api/payouts/", include("apps.payouts.urls")),
    path("api/docs/", schema_view.with_ui("swagger", cache_timeout=0), name="api-docs"),
]
