"""
Job card endpoints.
"""
from autocare_console.api_client import ApiClient
from autocare_console.schemas.job_card import JobOptionFormData
from autocare_console.services import as_list, service_call


@service_call("Error saving job card")
def add_job_card(client: ApiClient, form: JobOptionFormData):
    return client.post("/registerJobCard/add", json=form.to_wire())


@service_call("Failed to fetch job card", "Error fetching job card")
def get_job_card(client: ApiClient, job_card_id: int):
    return client.get(f"/registerJobCard/getById/{job_card_id}")


@service_call("Failed to update job card", "Error updating job card")
def update_job_card(client: ApiClient, job_card_id: int, form: JobOptionFormData):
    return client.patch(f"/registerJobCard/update/{job_card_id}", json=form.to_wire())


@service_call("Failed to delete job card", "Error deleting job card")
def delete_job_card(client: ApiClient, job_card_id: int):
    return client.delete(f"/registerJobCard/delete/{job_card_id}")


@service_call("Failed to search job cards", "Error searching job cards")
def search_job_cards(client: ApiClient, query: str) -> list:
    return as_list(client.get("/registerJobCard/search", params={"query": query}))
