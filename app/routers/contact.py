import logging

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.contact import ContactFormResponse, ContactSubmission
from app.services.contact_service import ContactForm, ContactSender, FormStatus

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/contact", response_model=ContactFormResponse)
async def submit_contact(
    submission: ContactSubmission,
    sender: ContactSender = Depends(deps.get_contact_sender),
):
    """
    Forward a contact form submission to the configured endpoint.
    """
    form = ContactForm(**submission.model_dump())
    status = await form.submit(sender)

    if status is FormStatus.ERROR:
        raise HTTPException(status_code=502, detail=form.message)

    logger.info("Contact form submission delivered")
    return ContactFormResponse(status=status.value, message=form.message)
