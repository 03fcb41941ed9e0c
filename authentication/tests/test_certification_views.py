import uuid

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from authentication.models import Certification
from marketplace.tests.factories import AdminFactory, BuyerFactory, CertificationFactory, SellerProfileFactory


class CertificationViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.seller_profile = SellerProfileFactory(is_verified=False)
        self.list_url = reverse("certifications:certification-list")

    def _detail_url(self, certification):
        return reverse("certifications:certification-detail", kwargs={"pk": str(certification.id)})

    def test_seller_submits_certification(self):
        self.client.force_authenticate(user=self.seller_profile.user)
        payload = {"name": "ISO 9001", "documentPath": "certifications/iso-9001.pdf"}
        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], "Certification submitted successfully")
        self.assertEqual(response.data["data"]["status"], "Pending")
        self.assertTrue(Certification.objects.filter(seller_profile=self.seller_profile).exists())

    def test_submit_requires_name(self):
        self.client.force_authenticate(user=self.seller_profile.user)
        response = self.client.post(self.list_url, {"documentPath": "a.pdf"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Name is required")

    def test_buyer_cannot_submit(self):
        self.client.force_authenticate(user=BuyerFactory())
        response = self.client.post(self.list_url, {"name": "ISO", "documentPath": "a.pdf"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_seller_lists_own_certifications(self):
        mine = CertificationFactory(seller_profile=self.seller_profile)
        CertificationFactory()
        self.client.force_authenticate(user=self.seller_profile.user)

        for url in (self.list_url, reverse("certifications:certification-mine")):
            response = self.client.get(url)
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            self.assertEqual([item["id"] for item in response.data["data"]["items"]], [str(mine.id)])

    def test_admin_lists_pending(self):
        pending = CertificationFactory()
        CertificationFactory(status=Certification.STATUS_APPROVED)
        self.client.force_authenticate(user=AdminFactory())

        response = self.client.get(reverse("certifications:certification-pending"))
        self.assertEqual([item["id"] for item in response.data["data"]["items"]], [str(pending.id)])

    def test_pending_is_admin_only(self):
        self.client.force_authenticate(user=self.seller_profile.user)
        response = self.client.get(reverse("certifications:certification-pending"))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_public_seller_listing_shows_approved_only(self):
        approved = CertificationFactory(seller_profile=self.seller_profile, status=Certification.STATUS_APPROVED)
        CertificationFactory(seller_profile=self.seller_profile)
        url = reverse("certifications:certification-seller", kwargs={"seller_profile_id": str(self.seller_profile.id)})

        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data["data"]["items"]], [str(approved.id)])

    def test_public_seller_listing_for_unknown_seller(self):
        url = reverse("certifications:certification-seller", kwargs={"seller_profile_id": str(uuid.uuid4())})
        self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_approved_certification_is_public(self):
        certification = CertificationFactory(status=Certification.STATUS_APPROVED)
        response = self.client.get(self._detail_url(certification))
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_pending_certification_hidden_from_strangers(self):
        certification = CertificationFactory(seller_profile=self.seller_profile)
        self.assertEqual(self.client.get(self._detail_url(certification)).status_code, status.HTTP_404_NOT_FOUND)

        self.client.force_authenticate(user=self.seller_profile.user)
        self.assertEqual(self.client.get(self._detail_url(certification)).status_code, status.HTTP_200_OK)

    def test_retrieve_with_malformed_id(self):
        response = self.client.get(reverse("certifications:certification-detail", kwargs={"pk": "nope"}))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Invalid certification ID format")

    def test_owner_updates_pending_certification(self):
        certification = CertificationFactory(seller_profile=self.seller_profile)
        self.client.force_authenticate(user=self.seller_profile.user)
        response = self.client.put(self._detail_url(certification), {"name": "ISO 14001"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        certification.refresh_from_db()
        self.assertEqual(certification.name, "ISO 14001")

    def test_reviewed_certification_cannot_be_updated(self):
        certification = CertificationFactory(seller_profile=self.seller_profile, status=Certification.STATUS_REJECTED)
        self.client.force_authenticate(user=self.seller_profile.user)
        response = self.client.put(self._detail_url(certification), {"name": "ISO 14001"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Only pending certifications can be updated")

    def test_other_seller_cannot_update(self):
        certification = CertificationFactory(seller_profile=self.seller_profile)
        self.client.force_authenticate(user=SellerProfileFactory().user)
        response = self.client.put(self._detail_url(certification), {"name": "Forged"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_sets_status_and_seller_becomes_verified(self):
        certification = CertificationFactory(seller_profile=self.seller_profile)
        self.client.force_authenticate(user=AdminFactory())
        url = reverse("certifications:certification-status", kwargs={"pk": str(certification.id)})
        response = self.client.put(url, {"status": "approved", "adminNotes": "Looks good"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["status"], "Approved")
        self.seller_profile.refresh_from_db()
        self.assertTrue(self.seller_profile.is_verified)
        self.assertTrue(self.seller_profile.has_verified_badge)

    def test_admin_set_status_rejects_unknown_value(self):
        certification = CertificationFactory(seller_profile=self.seller_profile)
        self.client.force_authenticate(user=AdminFactory())
        url = reverse("certifications:certification-status", kwargs={"pk": str(certification.id)})
        response = self.client.put(url, {"status": "Maybe"}, format="json")
        self.assertEqual(response.data["error"], "Status must be Approved or Rejected")


class VerificationViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = AdminFactory()
        self.client.force_authenticate(user=self.admin)
        self.seller_profile = SellerProfileFactory(is_verified=False)
        self.certification = CertificationFactory(seller_profile=self.seller_profile)

    def _url(self, name, pk):
        return reverse(f"certifications:verification-{name}", kwargs={"pk": str(pk)})

    def test_list_filters_by_status(self):
        CertificationFactory(status=Certification.STATUS_REJECTED)
        response = self.client.get(reverse("certifications:verification-list"), {"status": "rejected"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["pagination"]["totalItems"], 1)

    def test_pending_queue(self):
        response = self.client.get(reverse("certifications:verification-pending"))
        self.assertEqual([item["id"] for item in response.data["data"]["items"]], [str(self.certification.id)])

    def test_retrieve_includes_seller(self):
        response = self.client.get(self._url("detail", self.certification.id))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["seller"]["id"], str(self.seller_profile.id))

    def test_approve_verifies_seller(self):
        response = self.client.post(self._url("approve", self.certification.id))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.certification.refresh_from_db()
        self.assertEqual(self.certification.reviewed_by, self.admin)
        self.assertIsNotNone(self.certification.reviewed_at)
        self.seller_profile.refresh_from_db()
        self.assertTrue(self.seller_profile.is_verified)

    def test_only_pending_certifications_can_be_reviewed(self):
        self.client.post(self._url("approve", self.certification.id))
        response = self.client.post(self._url("approve", self.certification.id))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Only pending certifications can be reviewed")

    def test_reject_requires_admin_notes(self):
        response = self.client.post(self._url("reject", self.certification.id), {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Admin notes are required when rejecting")

    def test_reject_keeps_seller_unverified(self):
        response = self.client.post(
            self._url("reject", self.certification.id), {"adminNotes": "Document expired"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.certification.refresh_from_db()
        self.assertEqual(self.certification.status, Certification.STATUS_REJECTED)
        self.assertEqual(self.certification.admin_notes, "Document expired")
        self.seller_profile.refresh_from_db()
        self.assertFalse(self.seller_profile.is_verified)

    def test_approve_unknown_certification(self):
        response = self.client.post(self._url("approve", uuid.uuid4()))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_manual_verify_sets_flag(self):
        response = self.client.post(
            self._url("manual-verify", self.seller_profile.id), {"isVerified": True}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["data"]["isVerified"])
        self.seller_profile.refresh_from_db()
        self.assertTrue(self.seller_profile.has_verified_badge)

    def test_non_admin_is_forbidden(self):
        self.client.force_authenticate(user=self.seller_profile.user)
        response = self.client.get(reverse("certifications:verification-pending"))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
