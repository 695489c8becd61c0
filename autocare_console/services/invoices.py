"""
Vehicle invoice lookups.
"""
from autocare_console.api_client import ApiClient
from autocare_console.schemas.invoice import InvoiceData
from autocare_console.services import as_list, service_call


@service_call("Failed to fetch invoices", "Error fetching invoices for vehicle")
def invoices_for_vehicle(client: ApiClient, vehicle_reg_id: int) -> list[InvoiceData]:
    data = client.get(f"/api/vehicle-invoices/search/vehicle-reg/{vehicle_reg_id}")
    return [InvoiceData.model_validate(item) for item in as_list(data)]


@service_call("Failed to fetch invoice", "Error fetching invoice")
def invoice_by_number(client: ApiClient, invoice_number: str) -> InvoiceData:
    return InvoiceData.model_validate(client.get(f"/api/vehicle-invoices/number/{invoice_number}"))


@service_call("Failed to fetch invoices", "Error fetching invoices by date range")
def invoices_by_date_range(client: ApiClient, start_date: str, end_date: str) -> list[InvoiceData]:
    data = client.get(
        "/api/vehicle-invoices/search/date-range",
        params={"startDate": start_date, "endDate": end_date},
    )
    return [InvoiceData.model_validate(item) for item in as_list(data)]
