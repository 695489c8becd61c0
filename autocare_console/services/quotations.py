"""
Quotation endpoints.
"""
from autocare_console.api_client import ApiClient
from autocare_console.schemas.quotation import LabourLine, PartLine, Quotation, QuotationUpdate
from autocare_console.services import as_list, service_call


@service_call("Failed to fetch quotations", "Error fetching quotations")
def list_quotations(client: ApiClient) -> list[Quotation]:
    return [Quotation.model_validate(item) for item in as_list(client.get("/api/quotations"))]


@service_call("Failed to fetch quotation", "Error fetching quotation")
def get_quotation(client: ApiClient, quotation_id: int) -> Quotation:
    return Quotation.model_validate(client.get(f"/api/quotations/{quotation_id}"))


@service_call("Failed to update quotation", "Error updating quotation")
def update_quotation(client: ApiClient, quotation_id: int, changes: QuotationUpdate):
    return client.patch(f"/api/quotations/{quotation_id}", json=changes.to_wire())


@service_call("Failed to delete quotation", "Error deleting quotation")
def delete_quotation(client: ApiClient, quotation_id: int):
    return client.delete(f"/api/quotations/{quotation_id}")


@service_call("Failed to add quotation parts", "Error adding quotation parts")
def add_part_lines(client: ApiClient, vehicle_reg_id: int, lines: list[PartLine]):
    return client.post(
        f"/api/quotations/{vehicle_reg_id}/parts",
        json=[line.to_wire() for line in lines],
    )


@service_call("Failed to add quotation labour", "Error adding quotation labour")
def add_labour_lines(client: ApiClient, vehicle_reg_id: int, lines: list[LabourLine]):
    return client.post(
        f"/api/quotations/{vehicle_reg_id}/labours",
        json=[line.to_wire() for line in lines],
    )
