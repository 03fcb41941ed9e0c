from django.urls import re_path

from authentication.api.views import (
    ChangePasswordAPIView,
    ForgotPasswordAPIView,
    LoginAPIView,
    RefreshTokenAPIView,
    RegisterAPIView,
    ResetPasswordAPIView,
)


app_name = "auth"

urlpatterns = [
    re_path(r"^register/?$", RegisterAPIView.as_view(), name="register"),
    re_path(r"^login/?$", LoginAPIView.as_view(), name="login"),
    re_path(r"^refresh/?$", RefreshTokenAPIView.as_view(), name="refresh"),
    re_path(r"^forgot-password/?$", ForgotPasswordAPIView.as_view(), name="forgot_password"),
    re_path(r"^reset-password/?$", ResetPasswordAPIView.as_view(), name="reset_password"),
    re_path(r"^change-password/?$", ChangePasswordAPIView.as_view(), name="change_password"),
]
