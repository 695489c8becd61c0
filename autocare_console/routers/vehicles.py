"""
Vehicle registration pages.
"""
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, Request

from autocare_console.api_client import ApiClient
from autocare_console.errors import ServiceError, ValidationFailed, error_message
from autocare_console.schemas.spare_part import Transaction
from autocare_console.schemas.vehicle import (
    Vehicle, VehicleCreate, VehicleFilter, VehicleStatus, VehicleUpdate,
)
from autocare_console.services import parse_row, parse_rows, stock, vehicles
from autocare_console.validation import ensure_valid, validate_vehicle_registration
from autocare_console.web import get_api_client, redirect, render, require_user, flash

router = APIRouter(prefix="/vehicles", tags=["vehicles"], dependencies=[Depends(require_user)])


@router.get("/", name="list_vehicles")
def list_vehicles(
    request: Request,
    appointment_id: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    status: Optional[str] = None,
    client: ApiClient = Depends(get_api_client),
):
    """
    List registrations, narrowed by appointment, date range or status.
    """
    filters = VehicleFilter(
        appointment_id=appointment_id or None,
        start_date=start_date or None,
        end_date=end_date or None,
        status=status or None,
    )
    error = None
    try:
        rows = parse_rows(Vehicle, vehicles.filter_vehicles(client, filters), "Failed to fetch vehicles")
    except ServiceError as e:
        rows = []
        error = e.message

    return render(
        request,
        "vehicles/list.html",
        {"vehicles": rows, "filters": filters, "statuses": list(VehicleStatus), "error": error},
    )


@router.get("/new", name="new_vehicle_form")
def new_vehicle_form(request: Request):
    return render(request, "vehicles/form.html", {"vehicle": VehicleCreate(), "statuses": list(VehicleStatus)})


@router.post("/new", name="create_vehicle")
def create_vehicle(
    request: Request,
    vehicle: Annotated[VehicleCreate, Form()],
    client: ApiClient = Depends(get_api_client),
):
    """
    Register a vehicle; the draft is kept on the form when anything fails.
    """
    try:
        ensure_valid(validate_vehicle_registration(vehicle))
        vehicles.add_vehicle(client, vehicle)
    except ValidationFailed as e:
        return _form_error(request, vehicle, str(e))
    except ServiceError as e:
        return _form_error(request, vehicle, error_message(e, "Error saving vehicle"))

    flash(request, "Vehicle registered successfully!")
    return redirect(request, "list_vehicles")


@router.get("/{vehicle_reg_id}", name="show_vehicle")
def show_vehicle(request: Request, vehicle_reg_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        vehicle = parse_row(Vehicle, vehicles.get_vehicle(client, vehicle_reg_id), "Failed to fetch vehicle")
        parts = parse_rows(
            Transaction, stock.transactions_for_vehicle(client, vehicle_reg_id), "Failed to fetch transactions"
        )
    except ServiceError as e:
        flash(request, e.message, "error")
        return redirect(request, "list_vehicles")

    return render(request, "vehicles/show.html", {"vehicle": vehicle, "parts": parts})


@router.get("/{vehicle_reg_id}/edit", name="edit_vehicle_form")
def edit_vehicle_form(request: Request, vehicle_reg_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        vehicle = parse_row(Vehicle, vehicles.get_vehicle(client, vehicle_reg_id), "Failed to fetch vehicle")
    except ServiceError as e:
        flash(request, e.message, "error")
        return redirect(request, "list_vehicles")

    return render(request, "vehicles/form.html", {"vehicle": vehicle, "statuses": list(VehicleStatus)})


@router.post("/{vehicle_reg_id}/edit", name="update_vehicle")
def update_vehicle(
    request: Request,
    vehicle_reg_id: int,
    form: Annotated[VehicleCreate, Form()],
    client: ApiClient = Depends(get_api_client),
):
    vehicle = VehicleUpdate(vehicle_reg_id=vehicle_reg_id, **form.model_dump())
    try:
        ensure_valid(validate_vehicle_registration(vehicle))
        vehicles.update_vehicle(client, vehicle)
    except ValidationFailed as e:
        return _form_error(request, vehicle, str(e))
    except ServiceError as e:
        return _form_error(request, vehicle, error_message(e, "Error updating vehicle"))

    flash(request, "Vehicle updated successfully!")
    return redirect(request, "show_vehicle", vehicle_reg_id=vehicle_reg_id)


@router.post("/{vehicle_reg_id}/delete", name="delete_vehicle")
def delete_vehicle(request: Request, vehicle_reg_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        vehicles.delete_vehicle(client, vehicle_reg_id)
        flash(request, "Vehicle deleted successfully!")
    except ServiceError as e:
        flash(request, error_message(e, e.message), "error")

    return redirect(request, "list_vehicles")


@router.post("/{vehicle_reg_id}/parts/{transaction_id}/delete", name="delete_vehicle_part")
def delete_vehicle_part(
    request: Request,
    vehicle_reg_id: int,
    transaction_id: int,
    client: ApiClient = Depends(get_api_client),
):
    try:
        vehicles.delete_vehicle_spare_part(client, transaction_id)
        flash(request, "Spare part removed from vehicle.")
    except ServiceError as e:
        flash(request, e.message, "error")

    return redirect(request, "show_vehicle", vehicle_reg_id=vehicle_reg_id)


def _form_error(request: Request, vehicle, message: str):
    return render(
        request,
        "vehicles/form.html",
        {"vehicle": vehicle, "statuses": list(VehicleStatus), "error": message},
        status_code=400,
    )
