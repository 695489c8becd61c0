"""
Job card pages.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request

from autocare_console.api_client import ApiClient
from autocare_console.errors import ServiceError, ValidationFailed, error_message
from autocare_console.schemas.job_card import JobCard, JobOptionFormData, JobType
from autocare_console.services import job_cards, parse_row, parse_rows
from autocare_console.validation import ensure_valid, validate_job_option
from autocare_console.web import flash, get_api_client, redirect, render, require_user

router = APIRouter(prefix="/job-cards", tags=["job cards"], dependencies=[Depends(require_user)])


@router.get("/", name="list_job_cards")
def list_job_cards(request: Request, query: str = "", client: ApiClient = Depends(get_api_client)):
    error = None
    rows = []
    if query.strip():
        try:
            found = job_cards.search_job_cards(client, query.strip())
            rows = parse_rows(JobCard, found, "Failed to search job cards")
        except ServiceError as e:
            error = e.message

    return render(request, "job_cards/list.html", {"job_cards": rows, "query": query, "error": error})


@router.get("/new", name="new_job_option_form")
def new_job_option_form(request: Request):
    return _render_form(request, JobOptionFormData())


@router.post("/new", name="create_job_option")
def create_job_option(
    request: Request,
    form: Annotated[JobOptionFormData, Form()],
    client: ApiClient = Depends(get_api_client),
):
    """
    Add a job option. On success the form comes back empty with a banner.
    """
    try:
        ensure_valid(validate_job_option(form))
        job_cards.add_job_card(client, form)
    except ValidationFailed as e:
        return _render_form(request, form, error=str(e))
    except ServiceError as e:
        return _render_form(request, form, error=error_message(e, "Error saving job card"))

    flash(request, "Job added successfully!")
    return redirect(request, "new_job_option_form")


@router.get("/{job_card_id}/edit", name="edit_job_card_form")
def edit_job_card_form(request: Request, job_card_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        job_card = parse_row(JobCard, job_cards.get_job_card(client, job_card_id), "Failed to fetch job card")
    except ServiceError as e:
        flash(request, e.message, "error")
        return redirect(request, "list_job_cards")

    return _render_form(request, job_card, job_card_id=job_card_id)


@router.post("/{job_card_id}/edit", name="update_job_card")
def update_job_card(
    request: Request,
    job_card_id: int,
    form: Annotated[JobOptionFormData, Form()],
    client: ApiClient = Depends(get_api_client),
):
    try:
        ensure_valid(validate_job_option(form))
        job_cards.update_job_card(client, job_card_id, form)
    except ValidationFailed as e:
        return _render_form(request, form, job_card_id=job_card_id, error=str(e))
    except ServiceError as e:
        return _render_form(
            request, form, job_card_id=job_card_id, error=error_message(e, "Error updating job card")
        )

    flash(request, "Job card updated successfully!")
    return redirect(request, "list_job_cards")


@router.post("/{job_card_id}/delete", name="delete_job_card")
def delete_job_card(request: Request, job_card_id: int, client: ApiClient = Depends(get_api_client)):
    try:
        job_cards.delete_job_card(client, job_card_id)
        flash(request, "Job card deleted.")
    except ServiceError as e:
        flash(request, e.message, "error")

    return redirect(request, "list_job_cards")


def _render_form(request: Request, form, job_card_id=None, error=None):
    return render(
        request,
        "job_cards/form.html",
        {"form": form, "job_types": list(JobType), "job_card_id": job_card_id, "error": error},
        status_code=400 if error else 200,
    )
