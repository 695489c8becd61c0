"""
Vendor / supplier endpoints.
"""
from autocare_console.api_client import ApiClient, unwrap
from autocare_console.schemas.vendor import VendorDto
from autocare_console.services import as_list, service_call


@service_call("Failed to fetch vendors", "Error fetching vendors")
def list_vendors(client: ApiClient) -> list:
    return as_list(client.get("/vendor/getAll"))


@service_call("Failed to fetch vendor details", "Error fetching vendor details")
def get_vendor(client: ApiClient, vendor_id: int) -> VendorDto:
    data = client.get("/vendor/findById", params={"vendorId": vendor_id})
    return VendorDto.model_validate(unwrap(data, "body"))


@service_call("Failed to update vendor", "Error updating vendor")
def update_vendor(client: ApiClient, vendor_id: int, vendor: VendorDto):
    return client.patch(f"/vendor/update/{vendor_id}", json=vendor.to_wire())


@service_call("Failed to delete vendor", "Error deleting vendor")
def delete_vendor(client: ApiClient, vendor_id: int):
    return client.delete(f"/vendor/delete/{vendor_id}")
