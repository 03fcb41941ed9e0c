from .review_views import ReviewViewSet

__all__ = ["ReviewViewSet"]
