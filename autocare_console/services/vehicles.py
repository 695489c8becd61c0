"""
Vehicle registration endpoints.
"""
from typing import Union

from autocare_console.api_client import ApiClient, unwrap
from autocare_console.schemas.vehicle import VehicleCreate, VehicleFilter, VehicleUpdate
from autocare_console.services import as_list, service_call

VehicleId = Union[int, str]


@service_call("Failed to fetch vehicles", "Error fetching vehicles")
def list_vehicles(client: ApiClient) -> list:
    return as_list(client.get("/vehicle-reg/getAll"))


@service_call("Failed to add vehicle", "Error adding vehicle")
def add_vehicle(client: ApiClient, vehicle: VehicleCreate):
    return client.post("/vehicle-reg/add", json=vehicle.to_wire())


@service_call("Failed to fetch vehicle", "Error fetching vehicle")
def get_vehicle(client: ApiClient, vehicle_reg_id: VehicleId):
    data = client.get("/vehicle-reg/getById", params={"vehicleRegId": vehicle_reg_id})
    return unwrap(data, "data")


@service_call("Failed to update vehicle", "Error updating vehicle")
def update_vehicle(client: ApiClient, vehicle: VehicleUpdate):
    return client.patch(
        "/vehicle-reg/update",
        params={"vehicleRegId": vehicle.vehicle_reg_id},
        json=vehicle.to_wire(),
    )


@service_call("Failed to delete vehicle", "Error deleting vehicle")
def delete_vehicle(client: ApiClient, vehicle_reg_id: VehicleId):
    # The backend soft-deletes registrations through PUT
    return client.put("/vehicle-reg/delete", params={"vehicleRegId": vehicle_reg_id})


@service_call("Failed to delete vehicle spare part", "Error deleting vehicle spare part")
def delete_vehicle_spare_part(client: ApiClient, transaction_id: int):
    return client.delete("/sparePartTransactions/delete", params={"transactionId": transaction_id})


@service_call("Failed to fetch vehicles", "Error fetching vehicles by appointment")
def vehicles_by_appointment(client: ApiClient, filter_data: VehicleFilter) -> list:
    data = client.get(
        "/vehicle-reg/getByAppointmentId",
        params={"appointmentId": filter_data.appointment_id},
    )
    # A single registration comes back as a bare object
    if isinstance(data, dict) and "content" not in data:
        return [data]
    return as_list(data)


@service_call("Failed to fetch vehicles", "Error fetching vehicles by date range")
def vehicles_by_date_range(client: ApiClient, filter_data: VehicleFilter) -> list:
    return as_list(
        client.get(
            "/vehicle-reg/date-range",
            params={"startDate": filter_data.start_date, "endDate": filter_data.end_date},
        )
    )


@service_call("Failed to fetch vehicles", "Error fetching vehicles by status")
def vehicles_by_status(client: ApiClient, filter_data: VehicleFilter) -> list:
    return as_list(client.get("/vehicle-reg/GetStatus", params={"status": filter_data.status}))


def filter_vehicles(client: ApiClient, filter_data: VehicleFilter) -> list:
    """Pick the backend query matching whichever filter is filled in."""
    if filter_data.appointment_id:
        return vehicles_by_appointment(client, filter_data)
    if filter_data.start_date and filter_data.end_date:
        return vehicles_by_date_range(client, filter_data)
    if filter_data.status:
        return vehicles_by_status(client, filter_data)
    return list_vehicles(client)
