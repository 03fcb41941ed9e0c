from django.urls import re_path

from authentication.api.views import BuyerProfileView, ProfileView, SellerProfileView, VerificationStatusView


app_name = "profiles"

urlpatterns = [
    re_path(r"^$", ProfileView.as_view(), name="me"),
    re_path(r"^buyer/?$", BuyerProfileView.as_view(), name="buyer"),
    re_path(r"^seller/?$", SellerProfileView.as_view(), name="seller"),
    re_path(r"^verification/status/?$", VerificationStatusView.as_view(), name="verification_status"),
]
