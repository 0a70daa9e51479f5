from rest_framework import permissions
from rest_framework.exceptions import NotFound

from apps.authentication.permissions import IsAffiliate
from core.db import dashboard_db

from .models import Affiliate


class AffiliateScopedMixin:
    """
    Dashboard views only ever see rows owned by the caller's affiliate profile.
    """

    permission_classes = [permissions.IsAuthenticated, IsAffiliate]

    def get_affiliate(self) -> Affiliate:
        affiliate = getattr(self, "_affiliate", None)
        if affiliate is None:
            try:
                affiliate = Affiliate.objects.using(dashboard_db()).get(user=self.request.user)
            except Affiliate.DoesNotExist:
                raise NotFound("No affiliate profile is linked to this account.")
            self._affiliate = affiliate
        return affiliate
