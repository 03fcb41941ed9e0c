"""
ReviewService - Seller and product reviews

Buyers rate sellers (optionally about a specific product). Reviewed sellers
may reply, anyone signed in may report a review, and every change to the set
of reviews refreshes the seller's stored rating.
"""

from typing import Any, Dict

from django.db import transaction

from authentication.models import BuyerProfile, SellerProfile
from infrastructure.observability.metrics import reviews_created_total
from marketplace.catalog.domain.models import Product
from marketplace.reviews.domain.models import Review, ReviewReply
from utils.pagination import Page, PageRequest, paginate
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

from .rating_service import SellerRatingService


MAX_TEXT_LENGTH = 1000


def _validate_rating(rating) -> str | None:
    if not isinstance(rating, int) or isinstance(rating, bool) or not (1 <= rating <= 5):
        return "Rating must be between 1 and 5"
    return None


class ReviewService(BaseService):
    """
    Service for managing reviews.

    Responsibilities:
    - Create reviews for a seller or for a product
    - List reviews written, received and public per seller
    - Report, update and reply to reviews
    - Trigger rating updates via SellerRatingService

    Dependencies:
    - SellerRatingService: To refresh seller aggregates after review changes
    """

    def __init__(self, rating_service: SellerRatingService = None):
        super().__init__()
        self.rating_service = rating_service or SellerRatingService()

    def _base_queryset(self):
        return Review.objects.select_related("buyer_profile", "seller_profile", "product").prefetch_related(
            "replies"
        )

    def _create(self, buyer_profile, seller_profile, product, rating, comment) -> Review:
        with transaction.atomic():
            review = Review.objects.create(
                buyer_profile=buyer_profile,
                seller_profile=seller_profile,
                product=product,
                rating=rating,
                comment=comment or "",
            )
            self.rating_service.recompute(seller_profile)

        reviews_created_total.inc()
        self.logger.info("Review %s created for seller %s", review.id, seller_profile.id)
        return review

    def _validate_common(self, user, rating, comment) -> ServiceResult:
        error = _validate_rating(rating)
        if error:
            return service_err(ErrorCodes.VALIDATION_ERROR, error)
        if comment and len(comment) > MAX_TEXT_LENGTH:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Comment cannot exceed 1000 characters")

        buyer_profile = BuyerProfile.objects.filter(user=user).first()
        if buyer_profile is None:
            return service_err(ErrorCodes.BUYER_PROFILE_NOT_FOUND, "Buyer profile not found")
        return service_ok(buyer_profile)

    @BaseService.log_performance
    def create_review(self, user, data: Dict[str, Any]) -> ServiceResult[Review]:
        """
        Review a seller.

        Args:
            user: Buyer writing the review
            data: ``seller_profile_id``, ``rating``, optional ``comment`` and ``product_id``

        Returns:
            ServiceResult with the created Review
        """
        result = self._validate_common(user, data.get("rating"), data.get("comment"))
        if not result.ok:
            return result
        buyer_profile = result.value

        seller_profile = SellerProfile.objects.filter(id=data.get("seller_profile_id")).first()
        if seller_profile is None:
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")

        product = None
        if data.get("product_id"):
            product = Product.objects.filter(id=data["product_id"], seller_profile=seller_profile).first()
            if product is None:
                return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found for this seller")

        return service_ok(self._create(buyer_profile, seller_profile, product, data["rating"], data.get("comment")))

    @BaseService.log_performance
    def create_product_review(self, user, product_id, data: Dict[str, Any]) -> ServiceResult[Review]:
        """Review a product; the review is attributed to the product's seller."""
        result = self._validate_common(user, data.get("rating"), data.get("comment"))
        if not result.ok:
            return result

        try:
            product = Product.objects.select_related("seller_profile").get(id=product_id)
        except Product.DoesNotExist:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")

        return service_ok(
            self._create(result.value, product.seller_profile, product, data["rating"], data.get("comment"))
        )

    def my_reviews(self, user, page_request: PageRequest) -> ServiceResult[Page]:
        queryset = self._base_queryset().filter(buyer_profile__user=user)
        return service_ok(paginate(queryset, page_request))

    def received_reviews(self, user, page_request: PageRequest) -> ServiceResult[Page]:
        queryset = self._base_queryset().filter(seller_profile__user=user)
        return service_ok(paginate(queryset, page_request))

    def seller_reviews(self, seller_profile_id, page_request: PageRequest) -> ServiceResult[Page]:
        """Public approved reviews of a seller."""
        if not SellerProfile.objects.filter(id=seller_profile_id).exists():
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")
        queryset = self._base_queryset().filter(seller_profile_id=seller_profile_id, is_approved=True)
        return service_ok(paginate(queryset, page_request))

    def seller_summary(self, seller_profile_id) -> ServiceResult[Dict]:
        if not SellerProfile.objects.filter(id=seller_profile_id).exists():
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")
        return service_ok(self.rating_service.summary(seller_profile_id))

    @BaseService.log_performance
    def report_review(self, review_id, user, reason: str) -> ServiceResult[Review]:
        if not reason or not reason.strip():
            return service_err(ErrorCodes.VALIDATION_ERROR, "Reason is required")

        review = Review.objects.filter(id=review_id).first()
        if review is None:
            return service_err(ErrorCodes.REVIEW_NOT_FOUND, "Review not found")

        review.is_reported = True
        review.reported_reason = reason.strip()
        review.save(update_fields=["is_reported", "reported_reason", "updated_at"])
        self.logger.info("Review %s reported by user %s", review.id, user.id)
        return service_ok(review)

    @BaseService.log_performance
    def update_review(self, review_id, user, data: Dict[str, Any]) -> ServiceResult[Review]:
        review = Review.objects.select_related("buyer_profile", "seller_profile").filter(id=review_id).first()
        if review is None:
            return service_err(ErrorCodes.REVIEW_NOT_FOUND, "Review not found")
        if review.buyer_profile.user_id != user.id:
            return service_err(ErrorCodes.NOT_REVIEW_OWNER, "You can only update your own reviews")

        if data.get("rating") is not None:
            error = _validate_rating(data["rating"])
            if error:
                return service_err(ErrorCodes.VALIDATION_ERROR, error)
            review.rating = data["rating"]
        if data.get("comment") is not None:
            if len(data["comment"]) > MAX_TEXT_LENGTH:
                return service_err(ErrorCodes.VALIDATION_ERROR, "Comment cannot exceed 1000 characters")
            review.comment = data["comment"]

        with transaction.atomic():
            review.save()
            self.rating_service.recompute(review.seller_profile)
        return service_ok(review)

    @BaseService.log_performance
    def reply_to_review(self, review_id, user, reply_content: str) -> ServiceResult[ReviewReply]:
        if not reply_content or not reply_content.strip():
            return service_err(ErrorCodes.VALIDATION_ERROR, "Reply content is required")
        if len(reply_content) > MAX_TEXT_LENGTH:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Reply cannot exceed 1000 characters")

        review = Review.objects.select_related("seller_profile").filter(id=review_id).first()
        if review is None:
            return service_err(ErrorCodes.REVIEW_NOT_FOUND, "Review not found")
        if review.seller_profile.user_id != user.id:
            return service_err(ErrorCodes.NOT_REVIEW_OWNER, "Only the reviewed seller can reply")

        reply = ReviewReply.objects.create(
            review=review, seller_profile=review.seller_profile, reply_content=reply_content.strip()
        )
        return service_ok(reply)
