from rest_framework.routers import DefaultRouter

from .views import LinkViewSet

router = DefaultRouter()
router.register("", LinkViewSet, basename="link")

urlpatterns = router.urls
