"""Public contact form endpoint."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from zencafe.api.schemas import ContactMessageRequest, ContactMessageResponse
from zencafe.messaging.contact.message import ContactMessage
from zencafe.messaging.contact.submission import SubmitContactMessage

router = APIRouter(prefix="/api", tags=["contact"])


@router.post("/contact", status_code=201, response_model=ContactMessageResponse)
async def submit_contact_message(body: ContactMessageRequest) -> ContactMessageResponse:
    message_id = current_domain.process(SubmitContactMessage(**body.model_dump()), asynchronous=False)
    return ContactMessageResponse.model_validate(current_domain.repository_for(ContactMessage).get(message_id))
