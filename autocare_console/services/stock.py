"""
Spare part and stock transaction endpoints.
"""
from autocare_console.api_client import ApiClient
from autocare_console.schemas.spare_part import CreateTransaction, SparePart, TransactionFilter
from autocare_console.services import as_list, service_call


@service_call("Failed to fetch transactions", "Error fetching spare part transactions")
def list_transactions(client: ApiClient) -> list:
    return as_list(client.get("/sparePartTransactions/getAll"))


@service_call("Failed to add transaction", "Error adding spare part transaction")
def add_transaction(client: ApiClient, transaction: CreateTransaction):
    return client.post("/sparePartTransactions/add", json=transaction.to_wire())


@service_call("Failed to fetch transactions", "Error fetching vehicle transactions")
def transactions_for_vehicle(client: ApiClient, vehicle_reg_id: int) -> list:
    return as_list(
        client.get("/sparePartTransactions/vehicleRegId", params={"vehicleRegId": vehicle_reg_id})
    )


@service_call("Failed to fetch transactions", "Error fetching transactions by type and date")
def transactions_by_type_and_date(client: ApiClient, filter_data: TransactionFilter) -> list:
    params = {
        "transactionType": filter_data.transaction_type.value if filter_data.transaction_type else None,
        "startDate": filter_data.start_date,
        "endDate": filter_data.end_date,
    }
    return as_list(client.get("/sparePartTransactions/byTransactionTypeAndDateRange", params=params))


@service_call("Failed to delete transaction", "Error deleting spare part transaction")
def delete_transaction(client: ApiClient, transaction_id: int):
    return client.delete("/sparePartTransactions/delete", params={"transactionId": transaction_id})


@service_call("Failed to fetch spare parts", "Error fetching spare parts")
def list_spare_parts(client: ApiClient) -> list:
    return as_list(client.get("/sparePartManagement/getAll"))


@service_call("Failed to add spare part", "Error adding spare part")
def add_spare_part(client: ApiClient, part: SparePart):
    return client.post("/sparePartManagement/addPart", json=part.to_wire())


@service_call("Failed to delete spare part", "Error deleting spare part")
def delete_spare_part(client: ApiClient, spare_part_id: int):
    return client.delete(f"/sparePartManagement/delete/{spare_part_id}")


@service_call("Failed to search spare parts", "Error searching spare parts")
def search_spare_parts(client: ApiClient, query: str) -> list:
    return as_list(client.get("/Filter/searchBarFilter", params={"searchBarInput": query}))
