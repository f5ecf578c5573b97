"""Contact API — JSON endpoint behind the contact form.

Invariants:
    - Response body is always a ContactResult
    - 200 sent; 400 spam, missing or overlong fields; 502 relay failure; 503 not configured
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from resume_site.api.dependencies import get_contact_service
from resume_site.schemas.contact import ContactForm, ContactResult
from resume_site.services.contact_service import ContactService

router = APIRouter(prefix="/api/v1/contact", tags=["contact"])


@router.post("", response_model=ContactResult)
async def submit_contact(
    body: ContactForm, contact: ContactService = Depends(get_contact_service),
):
    result, status_code = await contact.submit(body)
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))
