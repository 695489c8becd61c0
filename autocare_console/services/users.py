"""
Authentication and account endpoints.
"""
from autocare_console.api_client import ApiClient
from autocare_console.schemas.user import (
    ForgetPassword, SignInData, SignUpData, UpdatePasswordData, VerifyEmail,
)
from autocare_console.services import service_call


@service_call("Failed to save user", "Error saving user")
def sign_up(client: ApiClient, user: SignUpData):
    return client.post("/user/registerUser", json=user.to_wire())


@service_call("Failed to login user", "Error logging in user")
def sign_in(client: ApiClient, credentials: SignInData):
    return client.post("/jwt/login", json=credentials.to_wire())


@service_call("Send OTP Error", "Error sending OTP")
def send_otp(client: ApiClient, email: ForgetPassword):
    return client.post("/emailVerification/send-otp", json=email.to_wire())


@service_call("Send OTP Error", "Error sending password reset")
def forgot_password(client: ApiClient, email: ForgetPassword):
    return client.post("/user/forgot-password", params={"email": email.email})


@service_call("Verify OTP Error", "Error verifying OTP")
def verify_otp(client: ApiClient, verify: VerifyEmail):
    return client.post("/emailVerification/verify-otp", json=verify.to_wire())


@service_call("Password reset failed", "Error resetting password")
def reset_password(client: ApiClient, data: UpdatePasswordData):
    return client.post("/user/update-password", json=data.to_wire())
