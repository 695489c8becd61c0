"""
Service catalogue pages.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request

from autocare_console.api_client import ApiClient
from autocare_console.errors import ServiceError, ValidationFailed, error_message
from autocare_console.schemas.service import Service, ServiceFormData
from autocare_console.services import garage_services, parse_row, parse_rows
from autocare_console.validation import ensure_valid, validate_service
from autocare_console.web import flash, get_api_client, redirect, render, require_user

router = APIRouter(prefix="/services", tags=["services"], dependencies=[Depends(require_user)])


@router.get("/", name="list_services")
def list_services(request: Request, client: ApiClient = Depends(get_api_client)):
    error = None
    try:
        rows = parse_rows(Service, garage_services.list_services(client), "Failed to fetch services")
    except ServiceError as e:
        rows = []
        error = e.message

    return render(request, "services/list.html", {"services": rows, "error": error})


@router.get("/new", name="new_service_form")
def new_service_form(request: Request):
    return render(request, "services/form.html", {"form": ServiceFormData()})


@router.post("/new", name="create_service")
def create_service(
    request: Request,
    form: Annotated[ServiceFormData, Form()],
    client: ApiClient = Depends(get_api_client),
):
    try:
        ensure_valid(validate_service(form))
        garage_services.add_service(client, form)
    except ValidationFailed as e:
        return _form_error(request, form, str(e))
    except ServiceError as e:
        return _form_error(request, form, error_message(e, "Error adding service"))

    flash(request, "Service added successfully!")
    return redirect(request, "list_services")


@router.get("/{service_id}/edit", name="edit_service_form")
def edit_service_form(request: Request, service_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        service = parse_row(Service, garage_services.get_service(client, service_id), "Failed to fetch service")
    except ServiceError as e:
        flash(request, e.message, "error")
        return redirect(request, "list_services")

    return render(request, "services/form.html", {"form": service, "service_id": service_id})


@router.post("/{service_id}/edit", name="update_service")
def update_service(
    request: Request,
    service_id: int,
    form: Annotated[ServiceFormData, Form()],
    client: ApiClient = Depends(get_api_client),
):
    try:
        ensure_valid(validate_service(form))
        garage_services.update_service(client, service_id, form)
    except ValidationFailed as e:
        return _form_error(request, form, str(e), service_id)
    except ServiceError as e:
        return _form_error(request, form, error_message(e, "Error updating service"), service_id)

    flash(request, "Service updated successfully.")
    return redirect(request, "list_services")


@router.post("/{service_id}/delete", name="delete_service")
def delete_service(request: Request, service_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        garage_services.delete_service(client, service_id)
        flash(request, "Service deleted.")
    except ServiceError as e:
        flash(request, e.message, "error")

    return redirect(request, "list_services")


def _form_error(request: Request, form: ServiceFormData, message: str, service_id=None):
    return render(
        request,
        "services/form.html",
        {"form": form, "service_id": service_id, "error": message},
        status_code=400,
    )
