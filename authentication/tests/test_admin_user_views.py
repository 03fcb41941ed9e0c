import uuid

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.tests.factories import AdminFactory, BuyerFactory, SellerFactory


class AdminUserViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = AdminFactory()
        self.client.force_authenticate(user=self.admin)
        self.buyer = BuyerFactory(email="joana@acme.pt", username="joana@acme.pt")
        self.seller = SellerFactory(email="rui@metals.pt", username="rui@metals.pt")

    def _url(self, name, user):
        return reverse(f"admin_users:user-{name}", kwargs={"pk": str(user.id)})

    def test_list_users_uses_admin_page_size(self):
        response = self.client.get(reverse("admin_users:user-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        pagination = response.data["data"]["pagination"]
        self.assertEqual(pagination["totalItems"], 3)
        self.assertEqual(pagination["pageSize"], 50)

    def test_list_users_clamps_page_size_to_maximum(self):
        response = self.client.get(reverse("admin_users:user-list"), {"pageSize": 500})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        pagination = response.data["data"]["pagination"]
        self.assertEqual(pagination["pageSize"], 100)
        self.assertEqual(pagination["totalPages"], 1)
        self.assertEqual(len(response.data["data"]["items"]), 3)

    def test_search_clamps_page_size_to_maximum(self):
        response = self.client.get(reverse("admin_users:user-search"), {"role": "buyer", "pageSize": 500})
        self.assertEqual(response.data["data"]["pagination"]["pageSize"], 100)

    def test_search_by_email_fragment(self):
        response = self.client.get(reverse("admin_users:user-search"), {"query": "acme"})
        emails = [item["email"] for item in response.data["data"]["items"]]
        self.assertEqual(emails, ["joana@acme.pt"])

    def test_search_by_role_is_case_insensitive(self):
        response = self.client.get(reverse("admin_users:user-search"), {"role": "seller"})
        ids = [item["id"] for item in response.data["data"]["items"]]
        self.assertEqual(ids, [str(self.seller.id)])

    def test_search_with_unknown_role(self):
        response = self.client.get(reverse("admin_users:user-search"), {"role": "Owner"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_retrieve_user(self):
        response = self.client.get(self._url("detail", self.buyer))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["role"], "Buyer")
        self.assertFalse(response.data["data"]["isLocked"])

    def test_retrieve_unknown_user(self):
        response = self.client.get(reverse("admin_users:user-detail", kwargs={"pk": str(uuid.uuid4())}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "User not found")

    def test_retrieve_with_malformed_id(self):
        response = self.client.get(reverse("admin_users:user-detail", kwargs={"pk": "42"}))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Invalid user ID format")

    def test_lock_and_unlock(self):
        response = self.client.post(self._url("lock", self.buyer), {"reason": "Chargeback fraud"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.buyer.refresh_from_db()
        self.assertTrue(self.buyer.is_locked)
        self.assertEqual(self.buyer.lock_reason, "Chargeback fraud")
        self.assertIsNotNone(self.buyer.lock_date)

        response = self.client.post(self._url("unlock", self.buyer))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.buyer.refresh_from_db()
        self.assertFalse(self.buyer.is_locked)
        self.assertIsNone(self.buyer.lock_reason)
        self.assertIsNone(self.buyer.lock_date)

    def test_admin_cannot_lock_self(self):
        response = self.client.post(self._url("lock", self.admin), {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "You cannot lock your own account")

    def test_lock_unknown_user(self):
        url = reverse("admin_users:user-lock", kwargs={"pk": str(uuid.uuid4())})
        self.assertEqual(self.client.post(url, {}, format="json").status_code, status.HTTP_404_NOT_FOUND)

    def test_non_admin_is_forbidden(self):
        self.client.force_authenticate(user=self.buyer)
        self.assertEqual(self.client.get(reverse("admin_users:user-list")).status_code, status.HTTP_403_FORBIDDEN)

    def test_anonymous_is_unauthorized(self):
        self.client.force_authenticate(user=None)
        response = self.client.get(reverse("admin_users:user-list"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
