"""Contact form route"""

from fastapi import APIRouter

from api.responses import SuccessResponse
from domain.schemas.contact_schemas import ContactForm
from services.contact_service import ContactService

router = APIRouter(tags=["Contact"])


@router.post("/contact", response_model=SuccessResponse)
def send_contact_message(form: ContactForm):
    """Forward a contact form submission to the site inbox."""
    ContactService.send_contact_message(form)
    return {"success": True}
