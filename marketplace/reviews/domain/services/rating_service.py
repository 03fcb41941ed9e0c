"""
SellerRatingService - Aggregate rating calculations

Keeps ``SellerProfile.average_rating`` and ``number_of_ratings`` in step with
approved reviews and builds the public rating summary.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict

from django.db.models import Avg, Count

from authentication.models import SellerProfile
from marketplace.reviews.domain.models import Review
from utils.service_base import BaseService


class SellerRatingService(BaseService):
    @staticmethod
    def _approved(seller_profile_id):
        return Review.objects.filter(seller_profile_id=seller_profile_id, is_approved=True)

    def recompute(self, seller_profile: SellerProfile) -> SellerProfile:
        """Recalculate the stored rating aggregates for a seller."""
        stats = self._approved(seller_profile.id).aggregate(avg=Avg("rating"), count=Count("id"))

        average = stats["avg"]
        seller_profile.average_rating = (
            Decimal(str(average)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP) if average is not None else None
        )
        seller_profile.number_of_ratings = stats["count"]
        seller_profile.save(update_fields=["average_rating", "number_of_ratings", "updated_at"])

        self.logger.debug(
            "Seller %s rating recomputed: %s over %s reviews",
            seller_profile.id,
            seller_profile.average_rating,
            seller_profile.number_of_ratings,
        )
        return seller_profile

    def summary(self, seller_profile_id) -> Dict:
        """``{averageRating, totalReviews, ratingDistribution}`` for approved reviews."""
        reviews = self._approved(seller_profile_id)
        stats = reviews.aggregate(avg=Avg("rating"), count=Count("id"))

        distribution = {str(star): 0 for star in range(1, 6)}
        for row in reviews.values("rating").annotate(total=Count("id")):
            distribution[str(row["rating"])] = row["total"]

        average = stats["avg"]
        return {
            "averageRating": round(float(average), 2) if average is not None else 0.0,
            "totalReviews": stats["count"],
            "ratingDistribution": distribution,
        }
