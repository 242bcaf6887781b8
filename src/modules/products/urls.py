"""Product URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.products.views import ProductViewSet

router = DefaultRouter(trailing_slash=False)
# Prices contain dots, so ``.json``-style format suffixes are not routed.
router.include_format_suffixes = False
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
