from pydantic import BaseModel, Field


class ContactSubmission(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    message: str = Field(..., min_length=1)


class ContactFormResponse(BaseModel):
    status: str
    message: str
