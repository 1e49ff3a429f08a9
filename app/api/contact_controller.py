"""
app/api/contact_controller.py

Handles incoming requests to POST /api/contact.

This layer is responsible only for HTTP concerns:
  - Parsing the JSON body into a ContactRequest.
  - Delegating validation and persistence to ContactService.
  - Translating service-level errors into appropriate HTTP responses.

Responses:
  201  The contact was appended to the ledger.
  400  A required field (name, email, mobile) was missing or blank.
  500  The ledger could not be read or written.  Nothing was saved and
       the caller should resubmit.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.constants import CONTACT_SAVED_MESSAGE
from app.core.exceptions import AppBaseException, StorageError, ValidationError
from app.core.logger import get_logger
from app.models.contact_models import ContactRequest, ContactResponse
from app.services.contact_service import contact_service

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Contact"])

_SAVE_FAILED = "Failed to save contact."


def _err(message: str, status: int = 400) -> JSONResponse:
    """Return a JSON error response with the standard error shape."""
    return JSONResponse(status_code=status, content={"error": message})


@router.post(
    "/contact",
    status_code=201,
    response_model=ContactResponse,
    summary="Save contact details",
)
async def submit_contact(body: ContactRequest) -> JSONResponse:
    """
    Accepts a JSON body with three required, non-blank fields:

      name, email, mobile

    The server stamps the record with the current UTC time and appends it
    to the contacts workbook.  Duplicate submissions are stored as-is.
    """
    try:
        await contact_service.submit(body)

    except ValidationError as exc:
        logger.warning("Contact submission rejected: %s", exc)
        return _err(str(exc))

    except StorageError as exc:
        logger.exception("Error saving contact to ledger: %s", exc)
        return _err(_SAVE_FAILED, status=500)

    except AppBaseException as exc:
        logger.exception("Application error saving contact: %s", exc)
        return _err(_SAVE_FAILED, status=500)

    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error saving contact: %s", exc)
        return _err(_SAVE_FAILED, status=500)

    response = ContactResponse(success=True, message=CONTACT_SAVED_MESSAGE)
    return JSONResponse(status_code=201, content=response.model_dump())
