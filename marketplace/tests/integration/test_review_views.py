import uuid
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.models import Review, ReviewReply
from marketplace.tests.factories import (
    BuyerProfileFactory,
    ProductFactory,
    ReviewFactory,
    SellerProfileFactory,
)


class ReviewViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.buyer_profile = BuyerProfileFactory()
        self.seller_profile = SellerProfileFactory()
        self.product = ProductFactory(seller_profile=self.seller_profile)
        self.review_list_url = reverse("marketplace:review-list")

    def test_buyer_reviews_seller_and_rating_is_recomputed(self):
        ReviewFactory(seller_profile=self.seller_profile, rating=5)
        self.client.force_authenticate(user=self.buyer_profile.user)
        payload = {"sellerProfileId": str(self.seller_profile.id), "rating": 4, "comment": "Fast delivery"}
        response = self.client.post(self.review_list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["buyerName"], self.buyer_profile.name)
        self.seller_profile.refresh_from_db()
        self.assertEqual(self.seller_profile.average_rating, Decimal("4.50"))
        self.assertEqual(self.seller_profile.number_of_ratings, 2)

    def test_review_with_product_of_another_seller_fails(self):
        self.client.force_authenticate(user=self.buyer_profile.user)
        payload = {
            "sellerProfileId": str(self.seller_profile.id),
            "rating": 3,
            "productId": str(ProductFactory().id),
        }
        response = self.client.post(self.review_list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Product not found for this seller")

    def test_rating_out_of_range_is_rejected(self):
        self.client.force_authenticate(user=self.buyer_profile.user)
        payload = {"sellerProfileId": str(self.seller_profile.id), "rating": 6}
        response = self.client.post(self.review_list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Rating must be between 1 and 5")

    def test_review_of_unknown_seller_returns_404(self):
        self.client.force_authenticate(user=self.buyer_profile.user)
        payload = {"sellerProfileId": str(uuid.uuid4()), "rating": 4}
        response = self.client.post(self.review_list_url, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_product_review_is_attributed_to_product_seller(self):
        self.client.force_authenticate(user=self.buyer_profile.user)
        url = reverse("marketplace:review-product", kwargs={"product_id": str(self.product.id)})
        response = self.client.post(url, {"rating": 2, "comment": "Arrived damaged"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        review = Review.objects.get(id=response.data["data"]["id"])
        self.assertEqual(review.seller_profile, self.seller_profile)
        self.assertEqual(review.product, self.product)

    def test_product_review_with_malformed_id(self):
        self.client.force_authenticate(user=self.buyer_profile.user)
        url = reverse("marketplace:review-product", kwargs={"product_id": "bad"})
        response = self.client.post(url, {"rating": 2}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Invalid product ID format")

    def test_my_reviews_and_received_reviews(self):
        mine = ReviewFactory(buyer_profile=self.buyer_profile, seller_profile=self.seller_profile)
        ReviewFactory()

        self.client.force_authenticate(user=self.buyer_profile.user)
        response = self.client.get(reverse("marketplace:review-my-reviews"))
        self.assertEqual([item["id"] for item in response.data["data"]["items"]], [str(mine.id)])

        self.client.force_authenticate(user=self.seller_profile.user)
        response = self.client.get(reverse("marketplace:review-received"))
        self.assertEqual([item["id"] for item in response.data["data"]["items"]], [str(mine.id)])

    def test_public_seller_reviews_exclude_unapproved(self):
        visible = ReviewFactory(seller_profile=self.seller_profile)
        ReviewFactory(seller_profile=self.seller_profile, is_approved=False)
        url = reverse("marketplace:review-seller", kwargs={"seller_profile_id": str(self.seller_profile.id)})

        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data["data"]["items"]], [str(visible.id)])

    def test_public_seller_reviews_for_unknown_seller(self):
        url = reverse("marketplace:review-seller", kwargs={"seller_profile_id": str(uuid.uuid4())})
        self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_seller_summary(self):
        ReviewFactory(seller_profile=self.seller_profile, rating=5)
        ReviewFactory(seller_profile=self.seller_profile, rating=4)
        ReviewFactory(seller_profile=self.seller_profile, rating=4)
        url = reverse("marketplace:review-seller-summary", kwargs={"seller_profile_id": str(self.seller_profile.id)})

        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        summary = response.data["data"]
        self.assertEqual(summary["averageRating"], 4.33)
        self.assertEqual(summary["totalReviews"], 3)
        self.assertEqual(summary["ratingDistribution"], {"1": 0, "2": 0, "3": 0, "4": 2, "5": 1})

    def test_seller_summary_without_reviews(self):
        url = reverse("marketplace:review-seller-summary", kwargs={"seller_profile_id": str(self.seller_profile.id)})
        summary = self.client.get(url).data["data"]
        self.assertEqual(summary["averageRating"], 0.0)
        self.assertEqual(summary["totalReviews"], 0)

    def test_any_authenticated_user_can_report(self):
        review = ReviewFactory(seller_profile=self.seller_profile)
        self.client.force_authenticate(user=self.seller_profile.user)
        url = reverse("marketplace:review-report", kwargs={"pk": str(review.id)})
        response = self.client.post(url, {"reason": "Fake review"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        review.refresh_from_db()
        self.assertTrue(review.is_reported)
        self.assertEqual(review.reported_reason, "Fake review")

    def test_report_requires_authentication(self):
        review = ReviewFactory()
        url = reverse("marketplace:review-report", kwargs={"pk": str(review.id)})
        response = self.client.post(url, {"reason": "Spam"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_owner_updates_review_and_rating_follows(self):
        review = ReviewFactory(buyer_profile=self.buyer_profile, seller_profile=self.seller_profile, rating=2)
        self.client.force_authenticate(user=self.buyer_profile.user)
        url = reverse("marketplace:review-detail", kwargs={"pk": str(review.id)})
        response = self.client.put(url, {"rating": 5}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.seller_profile.refresh_from_db()
        self.assertEqual(self.seller_profile.average_rating, Decimal("5.00"))

    def test_other_buyer_cannot_update_review(self):
        review = ReviewFactory(seller_profile=self.seller_profile)
        self.client.force_authenticate(user=self.buyer_profile.user)
        url = reverse("marketplace:review-detail", kwargs={"pk": str(review.id)})
        response = self.client.put(url, {"rating": 1}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_reviewed_seller_replies(self):
        review = ReviewFactory(seller_profile=self.seller_profile)
        self.client.force_authenticate(user=self.seller_profile.user)
        url = reverse("marketplace:review-reply", kwargs={"pk": str(review.id)})
        response = self.client.post(url, {"replyContent": "Thank you for your feedback"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(ReviewReply.objects.get(review=review).reply_content, "Thank you for your feedback")

    def test_other_seller_cannot_reply(self):
        review = ReviewFactory(seller_profile=self.seller_profile)
        self.client.force_authenticate(user=SellerProfileFactory().user)
        url = reverse("marketplace:review-reply", kwargs={"pk": str(review.id)})
        response = self.client.post(url, {"replyContent": "Hello"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
