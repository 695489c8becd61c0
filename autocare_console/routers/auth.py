"""
Sign-in, sign-out, registration and password recovery pages.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from pydantic import ValidationError

from autocare_console.api_client import ApiClient, SessionExpired
from autocare_console.errors import ServiceError, error_message
from autocare_console.schemas.user import (
    ForgetPassword, SignInData, SignUpData, UpdatePasswordData, VerifyEmail,
)
from autocare_console.services import users
from autocare_console.tokens import is_token_valid
from autocare_console.validation import validate_sign_up, validate_user
from autocare_console.web import (
    TOKEN_SESSION_KEY, flash, get_api_client, redirect, render,
)

router = APIRouter(tags=["auth"])

PENDING_EMAIL_KEY = "pending_email"
VERIFIED_EMAIL_KEY = "verified_email"


def extract_token(response) -> str:
    """The login endpoint answers with the bare token, older builds wrap it."""
    if isinstance(response, dict):
        return response.get("token") or response.get("accessToken") or ""
    return str(response or "")


@router.get("/signIn", name="sign_in_form")
def sign_in_form(request: Request):
    if is_token_valid(request.session.get(TOKEN_SESSION_KEY)):
        return redirect(request, "list_vehicles")
    return render(request, "auth/sign_in.html", {"username": ""})


@router.post("/signIn", name="sign_in")
def sign_in(
    request: Request,
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    client: ApiClient = Depends(get_api_client),
):
    """
    Exchange credentials for a token and keep it in the session.
    """
    if not username.strip() or not password:
        return _sign_in_error(request, username, "Username and password required")

    try:
        credentials = SignInData(username=username.strip(), password=password)
        token = extract_token(users.sign_in(client, credentials))
    except (SessionExpired, ValidationError):
        return _sign_in_error(request, username, "Invalid credentials")
    except ServiceError as e:
        return _sign_in_error(request, username, error_message(e, "Failed to login user"))

    if not is_token_valid(token):
        return _sign_in_error(request, username, "Invalid credentials")

    request.session.clear()
    request.session[TOKEN_SESSION_KEY] = token
    flash(request, "Signed in successfully!")
    return redirect(request, "list_vehicles")


@router.get("/logout", name="logout")
def logout(request: Request):
    request.session.clear()
    return redirect(request, "sign_in_form")


def _sign_in_error(request: Request, username: str, message: str):
    return render(
        request,
        "auth/sign_in.html",
        {"username": username, "error": message},
        status_code=400,
    )


@router.get("/signUp", name="sign_up_form")
def sign_up_form(request: Request):
    return _sign_up_page(request, {})


@router.post("/signUp/otp", name="send_sign_up_otp")
def send_sign_up_otp(
    request: Request,
    email: Annotated[str, Form()] = "",
    client: ApiClient = Depends(get_api_client),
):
    """First step of registration: mail a one-time code to the address."""
    try:
        users.send_otp(client, ForgetPassword(email=email.strip()))
    except ValidationError:
        return _sign_up_page(request, {}, "Please enter a valid email address", email=email)
    except ServiceError as e:
        return _sign_up_page(request, {}, error_message(e, "Send OTP Error"), email=email)

    request.session[PENDING_EMAIL_KEY] = email.strip()
    request.session.pop(VERIFIED_EMAIL_KEY, None)
    flash(request, f"OTP sent to {email.strip()}")
    return redirect(request, "sign_up_form")


@router.post("/signUp/verify", name="verify_sign_up_otp")
def verify_sign_up_otp(
    request: Request,
    otp: Annotated[str, Form()] = "",
    client: ApiClient = Depends(get_api_client),
):
    email = request.session.get(PENDING_EMAIL_KEY)
    if not email:
        return _sign_up_page(request, {}, "Please request an OTP first")
    if not otp.strip():
        return _sign_up_page(request, {}, "Please enter the OTP", email=email)

    try:
        users.verify_otp(client, VerifyEmail(email=email, otp=otp.strip()))
    except (ValidationError, ServiceError):
        return _sign_up_page(request, {}, "Invalid or expired OTP", email=email)

    request.session[VERIFIED_EMAIL_KEY] = email
    flash(request, "Email verified successfully!")
    return redirect(request, "sign_up_form")


@router.post("/signUp", name="sign_up")
def sign_up(
    request: Request,
    fname: Annotated[str, Form()] = "",
    lname: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    mobile_number: Annotated[str, Form(alias="mobileNumber")] = "",
    address: Annotated[str, Form()] = "",
    client: ApiClient = Depends(get_api_client),
):
    """
    Register the account for the verified email address.
    """
    email = request.session.get(VERIFIED_EMAIL_KEY)
    form = {
        "fname": fname, "lname": lname, "email": email, "password": password,
        "mobile_number": mobile_number.strip(), "address": address,
    }
    if not email:
        return _sign_up_page(request, form, "Please verify your email before registering")

    errors = validate_sign_up(form)
    if errors:
        return _sign_up_page(request, form, errors[0].message)

    try:
        users.sign_up(client, SignUpData(**form))
    except ValidationError:
        return _sign_up_page(request, form, "Please check the registration details")
    except ServiceError as e:
        return _sign_up_page(request, form, error_message(e, "Failed to save user"))

    request.session.pop(PENDING_EMAIL_KEY, None)
    request.session.pop(VERIFIED_EMAIL_KEY, None)
    flash(request, "Registration successful. Please sign in.")
    return redirect(request, "sign_in_form")


@router.get("/forgotPassword", name="forgot_password_form")
def forgot_password_form(request: Request):
    return render(request, "auth/forgot_password.html", {"email": ""})


@router.post("/forgotPassword", name="forgot_password")
def forgot_password(
    request: Request,
    email: Annotated[str, Form()] = "",
    client: ApiClient = Depends(get_api_client),
):
    try:
        users.forgot_password(client, ForgetPassword(email=email.strip()))
    except ValidationError:
        return _forgot_password_error(request, email, "Please enter a valid email address")
    except ServiceError as e:
        return _forgot_password_error(request, email, error_message(e, "Failed to send OTP"))

    flash(request, "Reset Link Sent Successfully. Please Check Your Mail")
    return redirect(request, "sign_in_form")


@router.get("/resetPassword", name="reset_password_form")
def reset_password_form(request: Request, email: str = ""):
    return render(request, "auth/reset_password.html", {"email": email})


@router.post("/resetPassword", name="reset_password")
def reset_password(
    request: Request,
    email: Annotated[str, Form()] = "",
    new_password: Annotated[str, Form(alias="newPassword")] = "",
    confirm_password: Annotated[str, Form(alias="confirmPassword")] = "",
    client: ApiClient = Depends(get_api_client),
):
    errors = validate_user({"email": email.strip(), "password": new_password})
    if errors:
        return _reset_password_error(request, email, errors[0].message)
    if new_password != confirm_password:
        return _reset_password_error(request, email, "Passwords do not match")

    try:
        users.reset_password(client, UpdatePasswordData(email=email.strip(), new_password=new_password))
    except ValidationError:
        return _reset_password_error(request, email, "Email is invalid")
    except ServiceError as e:
        return _reset_password_error(request, email, error_message(e, "Password reset failed"))

    flash(request, "Password updated successfully. Please sign in.")
    return redirect(request, "sign_in_form")


def _sign_up_page(request: Request, form: dict, error=None, email=None):
    context = {
        "form": form,
        "pending_email": email or request.session.get(PENDING_EMAIL_KEY, ""),
        "verified_email": request.session.get(VERIFIED_EMAIL_KEY),
        "error": error,
    }
    return render(request, "auth/sign_up.html", context, status_code=400 if error else 200)


def _forgot_password_error(request: Request, email: str, message: str):
    return render(request, "auth/forgot_password.html", {"email": email, "error": message}, status_code=400)


def _reset_password_error(request: Request, email: str, message: str):
    return render(request, "auth/reset_password.html", {"email": email, "error": message}, status_code=400)
