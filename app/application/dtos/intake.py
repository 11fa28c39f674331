"""Lead intake request/response DTOs."""

from typing import Optional

from pydantic import ConfigDict, Field

from app.application.dtos.base import DTO


class LeadIntakePayload(DTO):
    """JSON body sent by the intake form."""

    honeypot: str = ""
    category: str
    name: str
    phone: str
    postal: str
    surface: str = ""
    location: str = ""
    budget: str = ""
    description: str = ""
    photo_name: str = Field(default="", alias="photoName")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "honeypot": "",
                "category": "Peinture : intérieure, rénovation",
                "name": "Jean Dupont",
                "phone": "0612345678",
                "postal": "21000",
                "surface": "45",
                "location": "Dijon — 21, Côte-d'Or, Bourgogne-Franche-Comté",
                "budget": "1500_3000",
                "description": "Salon et couloir à repeindre",
                "photoName": "salon.jpg | couloir.jpg",
            }
        },
    )


class IntakeResponse(DTO):
    """Response of the intake endpoint."""

    ok: bool
    error: Optional[str] = None
    retry_after: Optional[int] = Field(default=None, alias="retryAfter")


class IntakeResult(DTO):
    """Outcome of the server-side intake use case."""

    status_code: int
    response: IntakeResponse
    persisted: bool = False
