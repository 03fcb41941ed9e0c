"""
Django management command to create a user account.

Usage:
    python manage.py create_account --email "admin@example.com" --password "secret123" --role Admin
    python manage.py create_account --email "acme@example.com" --password "secret123" --role Seller --company "Acme"
"""

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.core.validators import validate_email
from django.db import transaction

from authentication.models import BuyerProfile, CustomUser, SellerProfile
from utils.rbac import ROLE_BUYER, ROLE_SELLER, ROLES, normalize_role


class Command(BaseCommand):
    help = "Create a user account, optionally with the profile matching its role"

    def add_arguments(self, parser):
        parser.add_argument("--email", type=str, required=True, help="Email address (must be unique)")
        parser.add_argument("--password", type=str, required=True, help="Password (at least 6 characters)")
        parser.add_argument("--role", type=str, default=ROLE_BUYER, help=f"One of: {', '.join(ROLES)}")
        parser.add_argument("--name", type=str, help="Buyer profile name (creates a buyer profile)")
        parser.add_argument("--company", type=str, help="Company name (creates a seller profile for sellers)")
        parser.add_argument("--verified", action="store_true", help="Mark the seller profile as verified")

    def handle(self, *args, **options):
        email = options["email"].strip().lower()
        password = options["password"]
        role = normalize_role(options["role"])

        try:
            validate_email(email)
        except ValidationError:
            raise CommandError(f"Invalid email format: {email}")
        if role is None:
            raise CommandError(f"Invalid role: {options['role']}. Must be one of: {', '.join(ROLES)}")
        if len(password) < 6:
            raise CommandError("Password must be at least 6 characters")
        if CustomUser.objects.filter(email__iexact=email).exists():
            raise CommandError(f"User with email {email} already exists")

        with transaction.atomic():
            user = CustomUser.objects.create_user(username=email, email=email, password=password, role=role)
            if role == ROLE_BUYER and options.get("name"):
                BuyerProfile.objects.create(user=user, name=options["name"])
            if role == ROLE_SELLER and options.get("company"):
                SellerProfile.objects.create(
                    user=user,
                    company_name=options["company"],
                    is_verified=options["verified"],
                    has_verified_badge=options["verified"],
                )

        self.stdout.write(self.style.SUCCESS(f"Created {role} account {user.email} ({user.id})"))
