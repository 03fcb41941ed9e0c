import uuid

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from authentication.models import BuyerProfile, SellerProfile
from marketplace.tests.factories import (
    BuyerFactory,
    BuyerProfileFactory,
    CertificationFactory,
    SellerFactory,
    SellerProfileFactory,
)


class ProfileMeViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("profiles:me")

    def test_buyer_gets_buyer_profile(self):
        profile = BuyerProfileFactory(name="Joana Silva")
        self.client.force_authenticate(user=profile.user)
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["user"]["role"], "Buyer")
        self.assertEqual(response.data["data"]["profile"]["name"], "Joana Silva")

    def test_user_without_profile_gets_null_profile(self):
        self.client.force_authenticate(user=SellerFactory())
        response = self.client.get(self.url)
        self.assertIsNone(response.data["data"]["profile"])

    def test_requires_authentication(self):
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_401_UNAUTHORIZED)


class BuyerProfileViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = BuyerFactory()
        self.client.force_authenticate(user=self.user)
        self.url = reverse("profiles:buyer")

    def test_missing_profile_returns_404(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Buyer profile not found")

    def test_post_creates_profile(self):
        payload = {"name": "Rui Costa", "companyName": "Costa Imports", "country": "Portugal"}
        response = self.client.post(self.url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Buyer profile saved successfully")
        profile = BuyerProfile.objects.get(user=self.user)
        self.assertEqual(profile.company_name, "Costa Imports")

    def test_post_without_name_on_new_profile(self):
        response = self.client.post(self.url, {"country": "Spain"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Name is required")

    def test_post_updates_existing_profile(self):
        BuyerProfileFactory(user=self.user, name="Old Name")
        self.client.post(self.url, {"phone": "+351210000000"}, format="json")

        profile = BuyerProfile.objects.get(user=self.user)
        self.assertEqual(profile.name, "Old Name")
        self.assertEqual(profile.phone, "+351210000000")

    def test_put_requires_existing_profile(self):
        response = self.client.put(self.url, {"name": "Rui"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_put_updates_profile(self):
        BuyerProfileFactory(user=self.user)
        response = self.client.put(self.url, {"country": "Spain"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["country"], "Spain")

    def test_seller_is_forbidden(self):
        self.client.force_authenticate(user=SellerFactory())
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_403_FORBIDDEN)


class SellerProfileViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = SellerFactory()
        self.client.force_authenticate(user=self.user)
        self.url = reverse("profiles:seller")

    def test_post_creates_unverified_profile(self):
        payload = {"companyName": "Acme Metals Lda", "taxId": "PT500000000", "industry": "Metals"}
        response = self.client.post(self.url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data["data"]
        self.assertEqual(data["companyName"], "Acme Metals Lda")
        self.assertFalse(data["isVerified"])
        self.assertTrue(SellerProfile.objects.filter(user=self.user).exists())

    def test_post_without_company_name_on_new_profile(self):
        response = self.client.post(self.url, {"industry": "Metals"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Company name is required")

    def test_put_updates_profile(self):
        SellerProfileFactory(user=self.user)
        response = self.client.put(self.url, {"description": "Stainless fasteners"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Seller profile updated successfully")

    def test_put_rejects_blank_company_name(self):
        SellerProfileFactory(user=self.user)
        response = self.client.put(self.url, {"companyName": ""}, format="json")
        self.assertEqual(response.data["error"], "Company name cannot be empty")

    def test_buyer_is_forbidden(self):
        self.client.force_authenticate(user=BuyerFactory())
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_403_FORBIDDEN)


class VerificationStatusViewTest(TestCase):
    def test_counts_certifications_by_status(self):
        profile = SellerProfileFactory()
        CertificationFactory(seller_profile=profile)
        CertificationFactory(seller_profile=profile, status="Approved")

        client = APIClient()
        client.force_authenticate(user=profile.user)
        response = client.get(reverse("profiles:verification_status"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data["data"]
        self.assertTrue(data["isVerified"])
        self.assertEqual(data["certifications"], {"total": 2, "pending": 1, "approved": 1, "rejected": 0})


class PublicSellerViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.verified = SellerProfileFactory(company_name="Acme Metals Lda", industry="Metals")
        self.other = SellerProfileFactory(company_name="Beta Plastics SA", industry="Plastics", country="Spain")
        self.unverified = SellerProfileFactory(is_verified=False)

    def test_list_shows_only_verified_sellers(self):
        response = self.client.get(reverse("public:seller_list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Sellers retrieved successfully")
        names = [item["companyName"] for item in response.data["data"]["items"]]
        self.assertEqual(names, ["Acme Metals Lda", "Beta Plastics SA"])

    def test_list_filters_by_industry_and_country(self):
        response = self.client.get(reverse("public:seller_list"), {"industry": "metals"})
        self.assertEqual(len(response.data["data"]["items"]), 1)

        response = self.client.get(reverse("public:seller_list"), {"country": "spain"})
        self.assertEqual(response.data["data"]["items"][0]["id"], str(self.other.id))

    def test_detail_of_verified_seller(self):
        url = reverse("public:seller_detail", kwargs={"seller_id": str(self.verified.id)})
        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["companyName"], "Acme Metals Lda")

    def test_detail_of_unverified_seller_is_hidden(self):
        url = reverse("public:seller_detail", kwargs={"seller_id": str(self.unverified.id)})
        self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_detail_with_malformed_id(self):
        response = self.client.get(reverse("public:seller_detail", kwargs={"seller_id": "abc"}))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Invalid seller ID format")

    def test_detail_of_unknown_seller(self):
        url = reverse("public:seller_detail", kwargs={"seller_id": str(uuid.uuid4())})
        self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)
