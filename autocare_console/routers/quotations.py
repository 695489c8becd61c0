"""
Quotation pages.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request

from autocare_console.api_client import ApiClient
from autocare_console.errors import ServiceError, ValidationFailed, error_message
from autocare_console.schemas.quotation import LabourLine, PartLine, QuotationUpdate
from autocare_console.search import QUOTATION_SEARCH_FIELDS, filter_rows
from autocare_console.services import quotations
from autocare_console.validation import ensure_valid, validate_quotation_line
from autocare_console.web import flash, get_api_client, redirect, render, require_user

router = APIRouter(prefix="/quotations", tags=["quotations"], dependencies=[Depends(require_user)])


@router.get("/", name="list_quotations")
def list_quotations(request: Request, search: str = "", client: ApiClient = Depends(get_api_client)):
    error = None
    try:
        rows = quotations.list_quotations(client)
    except ServiceError as e:
        rows = []
        error = e.message

    return render(
        request,
        "quotations/list.html",
        {"quotations": filter_rows(rows, search, QUOTATION_SEARCH_FIELDS), "search": search, "error": error},
    )


@router.get("/vehicle/{vehicle_reg_id}/lines", name="quotation_lines_form")
def quotation_lines_form(request: Request, vehicle_reg_id: int):
    return _lines_form(request, vehicle_reg_id, PartLine(quantity=1), LabourLine(quantity=1))


@router.post("/vehicle/{vehicle_reg_id}/parts", name="add_quotation_part")
def add_quotation_part(
    request: Request,
    vehicle_reg_id: int,
    line: Annotated[PartLine, Form()],
    client: ApiClient = Depends(get_api_client),
):
    try:
        ensure_valid(validate_quotation_line(line))
        quotations.add_part_lines(client, vehicle_reg_id, [line.priced(1)])
    except ValidationFailed as e:
        return _lines_form(request, vehicle_reg_id, line, LabourLine(quantity=1), str(e))
    except ServiceError as e:
        message = error_message(e, "Failed to add quotation parts")
        return _lines_form(request, vehicle_reg_id, line, LabourLine(quantity=1), message)

    flash(request, "Part added to the quotation.")
    return redirect(request, "quotation_lines_form", vehicle_reg_id=vehicle_reg_id)


@router.post("/vehicle/{vehicle_reg_id}/labours", name="add_quotation_labour")
def add_quotation_labour(
    request: Request,
    vehicle_reg_id: int,
    line: Annotated[LabourLine, Form()],
    client: ApiClient = Depends(get_api_client),
):
    try:
        ensure_valid(validate_quotation_line(line))
        quotations.add_labour_lines(client, vehicle_reg_id, [line.priced(1)])
    except ValidationFailed as e:
        return _lines_form(request, vehicle_reg_id, PartLine(quantity=1), line, str(e))
    except ServiceError as e:
        message = error_message(e, "Failed to add quotation labour")
        return _lines_form(request, vehicle_reg_id, PartLine(quantity=1), line, message)

    flash(request, "Labour added to the quotation.")
    return redirect(request, "quotation_lines_form", vehicle_reg_id=vehicle_reg_id)


@router.get("/{quotation_id}", name="show_quotation")
def show_quotation(request: Request, quotation_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        quotation = quotations.get_quotation(client, quotation_id)
    except ServiceError as e:
        flash(request, e.message, "error")
        return redirect(request, "list_quotations")

    return render(request, "quotations/show.html", {"quotation": quotation})


@router.get("/{quotation_id}/edit", name="edit_quotation_form")
def edit_quotation_form(request: Request, quotation_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        quotation = quotations.get_quotation(client, quotation_id)
    except ServiceError as e:
        flash(request, e.message, "error")
        return redirect(request, "list_quotations")

    changes = QuotationUpdate.model_validate(quotation.model_dump())
    return render(request, "quotations/form.html", {"quotation": changes, "quotation_id": quotation_id})


@router.post("/{quotation_id}/edit", name="update_quotation")
def update_quotation(
    request: Request,
    quotation_id: int,
    changes: Annotated[QuotationUpdate, Form()],
    client: ApiClient = Depends(get_api_client),
):
    """
    Save the customer details of a quotation. Its lines are left untouched.
    """
    if not changes.customer_name.strip():
        return _edit_error(request, quotation_id, changes, "Customer name is required")

    try:
        quotations.update_quotation(client, quotation_id, changes)
    except ServiceError as e:
        return _edit_error(request, quotation_id, changes, error_message(e, "Failed to update quotation"))

    flash(request, "Quotation updated successfully!")
    return redirect(request, "show_quotation", quotation_id=quotation_id)


@router.post("/{quotation_id}/delete", name="delete_quotation")
def delete_quotation(request: Request, quotation_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        quotations.delete_quotation(client, quotation_id)
        flash(request, "Quotation deleted successfully!")
    except ServiceError as e:
        flash(request, e.message, "error")

    return redirect(request, "list_quotations")


def _lines_form(request: Request, vehicle_reg_id: int, part: PartLine, labour: LabourLine, error=None):
    return render(
        request,
        "quotations/lines.html",
        {"vehicle_reg_id": vehicle_reg_id, "part": part, "labour": labour, "error": error},
        status_code=400 if error else 200,
    )


def _edit_error(request: Request, quotation_id: int, changes: QuotationUpdate, message: str):
    return render(
        request,
        "quotations/form.html",
        {"quotation": changes, "quotation_id": quotation_id, "error": message},
        status_code=400,
    )
