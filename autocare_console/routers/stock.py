"""
Stock management pages: spare-part transactions and the parts catalogue.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request

from autocare_console.api_client import ApiClient
from autocare_console.errors import ServiceError, ValidationFailed, error_message
from autocare_console.schemas.spare_part import (
    CreateTransaction, SparePart, Transaction, TransactionFilter, TransactionType,
)
from autocare_console.search import TRANSACTION_SEARCH_FIELDS, count_low_stock, filter_rows
from autocare_console.services import parse_rows, stock
from autocare_console.validation import (
    TRANSACTION_TYPES, ensure_valid, validate_spare_part, validate_transaction,
)
from autocare_console.web import flash, get_api_client, redirect, render, require_user

router = APIRouter(prefix="/stock", tags=["stock"], dependencies=[Depends(require_user)])


@router.get("/", name="list_transactions")
def list_transactions(
    request: Request,
    search: str = "",
    transaction_type: str = "",
    start_date: str = "",
    end_date: str = "",
    client: ApiClient = Depends(get_api_client),
):
    """
    Transactions, narrowed on the backend by type and date range when all
    three are given, then searched in the page.
    """
    filters = TransactionFilter(
        transaction_type=transaction_type if transaction_type in TRANSACTION_TYPES else None,
        start_date=start_date or None,
        end_date=end_date or None,
    )
    error = None
    try:
        if filters.transaction_type and filters.start_date and filters.end_date:
            found = stock.transactions_by_type_and_date(client, filters)
        else:
            found = stock.list_transactions(client)
        rows = parse_rows(Transaction, found, "Failed to fetch transactions")
    except ServiceError as e:
        rows = []
        error = e.message

    filtered = filter_rows(rows, search, TRANSACTION_SEARCH_FIELDS)
    return render(
        request,
        "stock/list.html",
        {
            "transactions": filtered,
            "search": search,
            "filters": filters,
            "transaction_types": list(TransactionType),
            "total_elements": len(filtered),
            "low_stock": count_low_stock(filtered),
            "error": error,
        },
    )


@router.get("/new", name="new_transaction_form")
def new_transaction_form(request: Request):
    return _render_form(request, CreateTransaction())


@router.post("/new", name="create_transaction")
def create_transaction(
    request: Request,
    transaction: Annotated[CreateTransaction, Form()],
    client: ApiClient = Depends(get_api_client),
):
    try:
        ensure_valid(validate_transaction(transaction))
        stock.add_transaction(client, transaction)
    except ValidationFailed as e:
        return _render_form(request, transaction, str(e))
    except ServiceError as e:
        return _render_form(request, transaction, error_message(e, "Error saving transaction"))

    flash(request, "Transaction added successfully!")
    return redirect(request, "list_transactions")


@router.post("/{transaction_id}/delete", name="delete_transaction")
def delete_transaction(request: Request, transaction_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        stock.delete_transaction(client, transaction_id)
        flash(request, "Transaction deleted.")
    except ServiceError as e:
        flash(request, e.message, "error")

    return redirect(request, "list_transactions")


@router.get("/parts", name="list_spare_parts")
def list_spare_parts(request: Request, query: str = "", client: ApiClient = Depends(get_api_client)):
    """Parts catalogue; a query goes to the backend search."""
    error = None
    try:
        if query.strip():
            found = stock.search_spare_parts(client, query.strip())
        else:
            found = stock.list_spare_parts(client)
        rows = parse_rows(SparePart, found, "Failed to fetch spare parts")
    except ServiceError as e:
        rows = []
        error = e.message

    return render(request, "stock/parts.html", {"parts": rows, "query": query, "error": error})


@router.get("/parts/new", name="new_spare_part_form")
def new_spare_part_form(request: Request):
    return render(request, "stock/part_form.html", {"part": SparePart()})


@router.post("/parts/new", name="create_spare_part")
def create_spare_part(
    request: Request,
    part: Annotated[SparePart, Form()],
    client: ApiClient = Depends(get_api_client),
):
    try:
        ensure_valid(validate_spare_part(part))
        stock.add_spare_part(client, part)
    except ValidationFailed as e:
        return _part_form_error(request, part, str(e))
    except ServiceError as e:
        return _part_form_error(request, part, error_message(e, "Failed to add spare part. Please try again."))

    flash(request, "Spare part added successfully!")
    return redirect(request, "list_spare_parts")


@router.post("/parts/{spare_part_id}/delete", name="delete_spare_part")
def delete_spare_part(request: Request, spare_part_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        stock.delete_spare_part(client, spare_part_id)
        flash(request, "Spare part deleted.")
    except ServiceError as e:
        flash(request, e.message, "error")

    return redirect(request, "list_spare_parts")


def _render_form(request: Request, transaction: CreateTransaction, error=None):
    return render(
        request,
        "stock/form.html",
        {"transaction": transaction, "transaction_types": list(TransactionType), "error": error},
        status_code=400 if error else 200,
    )


def _part_form_error(request: Request, part: SparePart, message: str):
    return render(request, "stock/part_form.html", {"part": part, "error": message}, status_code=400)
