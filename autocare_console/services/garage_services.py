"""
Service catalogue endpoints (labour items offered by the garage).
"""
from autocare_console.api_client import ApiClient
from autocare_console.schemas.service import ServiceFormData
from autocare_console.services import as_list, service_call


@service_call("Failed to fetch services", "Error fetching services")
def list_services(client: ApiClient) -> list:
    return as_list(client.get("/services/getAll"))


@service_call("Error adding service")
def add_service(client: ApiClient, form: ServiceFormData):
    return client.post("/services/AddService", json=form.to_wire())


@service_call("Failed to fetch service", "Error fetching service")
def get_service(client: ApiClient, service_id: int):
    return client.get(f"/services/getById/{service_id}")


@service_call("Failed to update service", "Error updating service")
def update_service(client: ApiClient, service_id: int, form: ServiceFormData):
    return client.patch(f"/services/update/{service_id}", json=form.to_wire())


@service_call("Failed to delete service", "Error deleting service")
def delete_service(client: ApiClient, service_id: int):
    return client.delete(f"/services/delete/{service_id}")
