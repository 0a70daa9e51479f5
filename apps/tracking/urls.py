from django.urls import re_path

from .views import ConversionReportView, redirect_short_link, redirect_vanity, tracking_pixel

# Trailing slashes are optional so shared links work either way.
urlpatterns = [
    re_path(r"^r/(?P<code>[^/]+)/?$", redirect_short_link, name="redirect"),
    re_path(
        r"^go/(?P<affiliate_code>[^/]+)/(?P<offer_slug>[^/]+)/?$",
        redirect_vanity,
        name="vanity-redirect",
    ),
    re_path(r"^pixel/?$", tracking_pixel, name="pixel"),
    re_path(r"^convert/?$", ConversionReportView.as_view(), name="convert"),
]
