from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from authentication.models import PasswordResetToken
from infrastructure.container import container
from marketplace.tests.factories import BuyerFactory

User = get_user_model()


class RegisterViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("auth:register")

    def test_register_defaults_to_buyer(self):
        response = self.client.post(self.url, {"email": "New.User@Example.com", "password": "secret1"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.data["data"]
        self.assertEqual(data["user"]["role"], "Buyer")
        self.assertEqual(data["user"]["email"], "new.user@example.com")
        self.assertEqual(data["userId"], data["user"]["id"])
        self.assertTrue(User.objects.get(email="new.user@example.com").check_password("secret1"))

    def test_register_normalizes_role(self):
        response = self.client.post(
            self.url, {"email": "seller@example.com", "password": "secret1", "role": "SELLER"}, format="json"
        )
        self.assertEqual(response.data["data"]["user"]["role"], "Seller")

    def test_register_rejects_unknown_role(self):
        response = self.client.post(
            self.url, {"email": "x@example.com", "password": "secret1", "role": "Owner"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(response.data["error"].startswith("Invalid role specified"))

    def test_register_rejects_admin_role(self):
        response = self.client.post(
            self.url, {"email": "x@y.com", "password": "secret123", "role": "Admin"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Admin accounts cannot be self-registered")
        self.assertFalse(User.objects.filter(email="x@y.com").exists())

    @override_settings(B2B_MARKETPLACE={"TEST_COMPATIBILITY_MODE": True})
    def test_register_admin_allowed_in_compatibility_mode(self):
        container.reset()
        response = self.client.post(
            self.url, {"email": "admin@example.com", "password": "secret123", "role": "admin"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["user"]["role"], "Admin")

    def test_register_requires_email_and_password(self):
        response = self.client.post(self.url, {"email": "x@example.com"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Email and password are required")

    def test_register_rejects_short_password(self):
        response = self.client.post(self.url, {"email": "x@example.com", "password": "12345"}, format="json")
        self.assertEqual(response.data["error"], "Password must be at least 6 characters")

    def test_duplicate_email_conflicts(self):
        BuyerFactory(email="taken@example.com", username="taken@example.com")
        response = self.client.post(self.url, {"email": "TAKEN@example.com", "password": "secret1"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertIn("error", response.data)
        self.assertIn("timestamp", response.data)

    @override_settings(B2B_MARKETPLACE={"TEST_COMPATIBILITY_MODE": True})
    def test_duplicate_email_echoes_user_in_compatibility_mode(self):
        container.reset()
        existing = BuyerFactory(email="taken@example.com", username="taken@example.com")
        response = self.client.post(self.url, {"email": "taken@example.com", "password": "secret1"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["userId"], str(existing.id))
        self.assertEqual(User.objects.filter(email="taken@example.com").count(), 1)


class LoginViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = BuyerFactory(email="buyer@example.com", username="buyer@example.com", password="secret1")
        self.url = reverse("auth:login")

    def test_login_returns_tokens(self):
        response = self.client.post(self.url, {"email": "buyer@example.com", "password": "secret1"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data["data"]
        self.assertEqual(data["userId"], str(self.user.id))
        self.assertTrue(data["token"])
        self.assertTrue(data["refreshToken"])
        self.assertGreater(data["expiresIn"], 0)

    def test_token_authenticates_requests(self):
        token = self.client.post(
            self.url, {"email": "buyer@example.com", "password": "secret1"}, format="json"
        ).data["data"]["token"]

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        response = self.client.get(reverse("profiles:me"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["user"]["email"], "buyer@example.com")

    def test_wrong_password_is_unauthorized(self):
        response = self.client.post(self.url, {"email": "buyer@example.com", "password": "nope123"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"], "Invalid credentials")

    def test_locked_account_is_unauthorized(self):
        self.user.is_locked = True
        self.user.save()
        response = self.client.post(self.url, {"email": "buyer@example.com", "password": "secret1"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"], "Account is locked")

    def test_token_of_locked_account_is_rejected(self):
        token = self.client.post(
            self.url, {"email": "buyer@example.com", "password": "secret1"}, format="json"
        ).data["data"]["token"]
        self.user.is_locked = True
        self.user.save()

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        self.assertEqual(self.client.get(reverse("profiles:me")).status_code, status.HTTP_401_UNAUTHORIZED)

    def test_refresh_issues_new_access_token(self):
        refresh = self.client.post(
            self.url, {"email": "buyer@example.com", "password": "secret1"}, format="json"
        ).data["data"]["refreshToken"]

        response = self.client.post(reverse("auth:refresh"), {"refreshToken": refresh}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["data"]["token"])

    def test_refresh_with_garbage_token_is_unauthorized(self):
        response = self.client.post(reverse("auth:refresh"), {"refreshToken": "garbage"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class PasswordResetViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = BuyerFactory(email="buyer@example.com", username="buyer@example.com", password="secret1")

    def test_forgot_password_sends_email_with_token(self):
        response = self.client.post(reverse("auth:forgot_password"), {"email": "buyer@example.com"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "If the email exists, a password reset link has been sent.")
        token = PasswordResetToken.objects.get(user=self.user)
        (message,) = container.email().sent_messages
        self.assertEqual(message.to, ["buyer@example.com"])
        self.assertIn(token.token, message.body)

    def test_forgot_password_for_unknown_email_looks_identical(self):
        response = self.client.post(reverse("auth:forgot_password"), {"email": "ghost@example.com"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(container.email().sent_messages, [])

    def test_reset_password_with_valid_token(self):
        token = PasswordResetToken.objects.create(user=self.user, expires_at=timezone.now() + timedelta(hours=1))
        response = self.client.post(
            reverse("auth:reset_password"), {"token": token.token, "newPassword": "brandnew"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("brandnew"))
        token.refresh_from_db()
        self.assertTrue(token.is_used)

    def test_reset_token_is_single_use(self):
        token = PasswordResetToken.objects.create(user=self.user, expires_at=timezone.now() + timedelta(hours=1))
        url = reverse("auth:reset_password")
        self.client.post(url, {"token": token.token, "newPassword": "brandnew"}, format="json")
        response = self.client.post(url, {"token": token.token, "newPassword": "another1"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_expired_token_is_rejected(self):
        token = PasswordResetToken.objects.create(user=self.user, expires_at=timezone.now() - timedelta(minutes=1))
        response = self.client.post(
            reverse("auth:reset_password"), {"token": token.token, "newPassword": "brandnew"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Invalid or expired token, or weak password.")

    def test_reset_requires_token_and_password(self):
        response = self.client.post(reverse("auth:reset_password"), {"token": "abc"}, format="json")
        self.assertEqual(response.data["error"], "Token and new password are required")


class ChangePasswordViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = BuyerFactory(password="secret1")
        self.client.force_authenticate(user=self.user)
        self.url = reverse("auth:change_password")

    def test_change_password(self):
        payload = {"currentPassword": "secret1", "newPassword": "secret2", "confirmPassword": "secret2"}
        response = self.client.put(self.url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("secret2"))

    def test_wrong_current_password(self):
        payload = {"currentPassword": "wrong", "newPassword": "secret2", "confirmPassword": "secret2"}
        response = self.client.put(self.url, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Current password is incorrect")

    def test_confirmation_mismatch(self):
        payload = {"currentPassword": "secret1", "newPassword": "secret2", "confirmPassword": "secret3"}
        response = self.client.put(self.url, payload, format="json")
        self.assertEqual(response.data["error"], "New password and confirmation do not match")

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        self.assertEqual(self.client.put(self.url, {}, format="json").status_code, status.HTTP_401_UNAUTHORIZED)
