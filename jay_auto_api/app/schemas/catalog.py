"""
Pydantic models for the shop catalog.

Services, cars and testimonials are seeded once when the repository is
built and never change afterwards, so the models are frozen.  Field
constraints (non‑negative prices, ratings within 0‑5) are checked when
the seed records are constructed.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Service(BaseModel):
    """A repair or maintenance service offered by the shop."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., examples=["1"])
    name: str = Field(..., examples=["Engine Diagnostics"])
    description: str
    # Key of the icon the site renders next to the service
    icon: str = Field(..., examples=["settings"])


class Car(BaseModel):
    """A used car in the inventory."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., examples=["1"])
    make: str = Field(..., examples=["Toyota"])
    model: str = Field(..., examples=["Camry SE"])
    year: int = Field(..., examples=[2021])
    price: int = Field(..., ge=0, description="Asking price in whole dollars")
    mileage: int = Field(..., ge=0)
    features: Tuple[str, ...] = Field(default=(), description="Highlighted features in display order")
    image: str = Field(..., examples=["/car1.jpg"])


class Testimonial(BaseModel):
    """A customer review shown on the home page."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    rating: int = Field(..., ge=0, le=5)
    text: str
    service: str = Field(..., examples=["Brake Service"])


class OpeningHours(BaseModel):
    days: str = Field(..., examples=["Monday - Friday"])
    hours: str = Field(..., examples=["8:00 AM - 6:00 PM"])


class ShopInfo(BaseModel):
    """Static business details displayed in the header, contact section and footer."""

    name: str
    phone: str
    email: str
    address: str
    opening_hours: List[OpeningHours]
    service_types: List[str] = Field(
        ...,
        description="Service type keys the contact form offers; the API accepts any non‑empty value",
    )
