"""
Invoice lookup page.
"""
from fastapi import APIRouter, Depends, Request

from autocare_console.api_client import ApiClient
from autocare_console.errors import ServiceError
from autocare_console.services import invoices
from autocare_console.web import get_api_client, render, require_user

router = APIRouter(prefix="/invoices", tags=["invoices"], dependencies=[Depends(require_user)])


@router.get("/", name="search_invoices")
def search_invoices(
    request: Request,
    vehicle_reg_id: str = "",
    invoice_number: str = "",
    start_date: str = "",
    end_date: str = "",
    client: ApiClient = Depends(get_api_client),
):
    """
    Look invoices up by invoice number, vehicle, or date range, in that order.
    """
    results = []
    error = None
    try:
        if invoice_number.strip():
            results = [invoices.invoice_by_number(client, invoice_number.strip())]
        elif vehicle_reg_id.strip():
            results = invoices.invoices_for_vehicle(client, vehicle_reg_id.strip())
        elif start_date and end_date:
            results = invoices.invoices_by_date_range(client, start_date, end_date)
    except ServiceError as e:
        error = e.message

    return render(
        request,
        "invoices/search.html",
        {
            "invoices": results,
            "vehicle_reg_id": vehicle_reg_id,
            "invoice_number": invoice_number,
            "start_date": start_date,
            "end_date": end_date,
            "error": error,
        },
    )
