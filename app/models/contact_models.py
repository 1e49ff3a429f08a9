"""
app/models/contact_models.py

Pydantic DTOs for the contact flow — request body and response.

Fields on the request are optional at the schema level so that a missing
or blank value reaches the service and is reported with the standard
400 error shape rather than FastAPI's 422.
"""

from typing import Optional

from pydantic import BaseModel


class ContactRequest(BaseModel):
    """
    JSON body for POST /api/contact.

        { "name": "Asha", "email": "asha@example.com", "mobile": "9876543210" }
    """

    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None


class ContactResponse(BaseModel):
    """
    Successful response for POST /api/contact.

        { "success": true, "message": "Contact saved." }
    """

    success: bool = True
    message: str
