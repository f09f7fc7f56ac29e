"""Dashboard invoice endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from sqlalchemy.orm import Session

from ...actions import create_invoice, delete_invoice, update_invoice
from ...config.settings import settings
from ...db.queries import fetch_customers, fetch_invoice_by_id, fetch_invoices
from ...schemas.actions import ActionResult, ActionState, ErrorKind, Redirected
from ...schemas.invoice import InvoiceFormContext, InvoiceListResponse
from ...services.page_cache import PageCache
from ...utils.logger import get_logger
from ..dependencies import get_cache, get_db_session, require_user

router = APIRouter(
    prefix=settings.INVOICES_PATH,
    tags=["Invoices"],
    dependencies=[Depends(require_user)],
)
logger = get_logger("api.invoices")

_ERROR_STATUS = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.STORAGE: 500,
}


def _state_response(state: ActionState) -> JSONResponse:
    status_code = _ERROR_STATUS.get(state.error, 200)
    return JSONResponse(status_code=status_code, content=state.model_dump(mode="json"))


def _to_response(result: ActionResult) -> Response:
    """Turn an action result into a 303 redirect or a state body."""
    if isinstance(result, Redirected):
        return RedirectResponse(url=result.path, status_code=303)
    return _state_response(result.state)


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    query: str = "",
    db: Session = Depends(get_db_session),
    cache: PageCache = Depends(get_cache),
) -> InvoiceListResponse:
    """
    Invoice listing, served from the page cache.

    Mutations invalidate every cached variant of this route.
    """
    def render() -> InvoiceListResponse:
        logger.info(f"Rendering invoice listing (query={query!r})")
        items = fetch_invoices(db, query)
        return InvoiceListResponse(items=items, total=len(items), query=query)

    return cache.get_or_render(settings.INVOICES_PATH, render, variant=query)


@router.get("/create", response_model=InvoiceFormContext)
async def create_form(db: Session = Depends(get_db_session)) -> InvoiceFormContext:
    """Customers to choose from in the create form."""
    return InvoiceFormContext(customers=fetch_customers(db))


@router.post("/create")
async def submit_create(request: Request, db: Session = Depends(get_db_session)) -> Response:
    """Handle the create invoice form."""
    form = await request.form()
    result = await create_invoice(ActionState(), dict(form), db)
    return _to_response(result)


@router.get("/{invoice_id}/edit", response_model=InvoiceFormContext)
async def edit_form(invoice_id: str, db: Session = Depends(get_db_session)) -> InvoiceFormContext:
    """Invoice and customers for the edit form."""
    invoice = fetch_invoice_by_id(db, invoice_id)
    if not invoice:
        raise HTTPException(status_code=404, detail=f"Invoice not found: {invoice_id}")

    return InvoiceFormContext(customers=fetch_customers(db), invoice=invoice)


@router.post("/{invoice_id}/edit")
async def submit_edit(
    invoice_id: str,
    request: Request,
    db: Session = Depends(get_db_session),
) -> Response:
    """Handle the edit invoice form."""
    form = await request.form()
    result = await update_invoice(invoice_id, ActionState(), dict(form), db)
    return _to_response(result)


@router.post("/{invoice_id}/delete")
async def submit_delete(invoice_id: str, db: Session = Depends(get_db_session)) -> Response:
    """Handle the delete button; the client stays on the listing."""
    state = await delete_invoice(invoice_id, db)
    return _state_response(state)
