"""
Vendor / supplier pages.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request

from autocare_console.api_client import ApiClient
from autocare_console.errors import ServiceError, ValidationFailed, error_message
from autocare_console.schemas.vendor import VendorDto
from autocare_console.services import parse_rows, vendors
from autocare_console.validation import ensure_valid, validate_vendor
from autocare_console.web import flash, get_api_client, redirect, render, require_user

router = APIRouter(prefix="/vendors", tags=["vendors"], dependencies=[Depends(require_user)])


@router.get("/", name="list_vendors")
def list_vendors(request: Request, client: ApiClient = Depends(get_api_client)):
    error = None
    try:
        rows = parse_rows(VendorDto, vendors.list_vendors(client), "Failed to fetch vendors")
    except ServiceError as e:
        rows = []
        error = e.message

    return render(request, "vendors/list.html", {"vendors": rows, "error": error})


@router.get("/{vendor_id}/edit", name="edit_vendor_form")
def edit_vendor_form(request: Request, vendor_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        vendor = vendors.get_vendor(client, vendor_id)
    except ServiceError as e:
        flash(request, e.message, "error")
        return redirect(request, "list_vendors")

    return render(request, "vendors/form.html", {"vendor": vendor, "vendor_id": vendor_id})


@router.post("/{vendor_id}/edit", name="update_vendor")
def update_vendor(
    request: Request,
    vendor_id: int,
    vendor: Annotated[VendorDto, Form()],
    client: ApiClient = Depends(get_api_client),
):
    vendor.vendor_id = vendor_id
    try:
        ensure_valid(validate_vendor(vendor))
        vendors.update_vendor(client, vendor_id, vendor)
    except (ValidationFailed, ServiceError) as e:
        message = str(e) if isinstance(e, ValidationFailed) else error_message(e, "Error updating vendor")
        return render(
            request,
            "vendors/form.html",
            {"vendor": vendor, "vendor_id": vendor_id, "error": message},
            status_code=400,
        )

    flash(request, "Supplier updated successfully!")
    return redirect(request, "list_vendors")


@router.post("/{vendor_id}/delete", name="delete_vendor")
def delete_vendor(request: Request, vendor_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        vendors.delete_vendor(client, vendor_id)
        flash(request, "Supplier deleted.")
    except ServiceError as e:
        flash(request, e.message, "error")

    return redirect(request, "list_vendors")
