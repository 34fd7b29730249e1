"""
Pydantic schemas for seed records.

Each schema mirrors one ORM model and checks the row-level invariants
before the row is handed to the database.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator, model_validator

# Free-form JSON object stored in JSON columns (context, results, event_data, ...)
JsonDocument = Dict[str, Any]


class UserSeed(BaseModel):
    """Application user."""
    id: UUID
    email: str
    full_name: str
    role: str = "user"
    status: str = "active"
    data_processing_consent: bool = False
    consent_granted_at: Optional[datetime] = None

    @field_validator("email")
    @classmethod
    def email_has_domain(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError(f"invalid email: {v}")
        return v.lower()

    @model_validator(mode="after")
    def consent_timestamp_matches_flag(self):
        if self.data_processing_consent != (self.consent_granted_at is not None):
            raise ValueError("consent_granted_at must be set iff data_processing_consent is true")
        return self


class OAuthAccountSeed(BaseModel):
    user_id: UUID
    provider: str
    provider_user_id: str
    provider_email: Optional[str] = None


class ChatSessionSeed(BaseModel):
    id: UUID
    user_id: UUID
    title: str
    status: str = "active"
    thread_id: Optional[str] = None
    context: JsonDocument = {}
    message_count: int = 0


class ChatMessageSeed(BaseModel):
    id: UUID
    session_id: UUID
    role: Literal["user", "ai", "system"]
    content: str
    model: Optional[str] = None
    tokens_total: Optional[int] = None
    latency_ms: Optional[int] = None


class _SearchCacheSeed(BaseModel):
    id: UUID
    search_hash: str
    results: List[JsonDocument]
    result_count: int
    created_at: datetime
    expires_at: datetime
    hit_count: int = 0

    @model_validator(mode="after")
    def check_results_and_expiry(self):
        if self.result_count != len(self.results):
            raise ValueError(
                f"result_count {self.result_count} != {len(self.results)} results"
            )
        if self.expires_at <= self.created_at:
            raise ValueError("expires_at must be after created_at")
        return self


class FlightSearchCacheSeed(_SearchCacheSeed):
    origin: str
    destination: str
    departure_date: date
    return_date: Optional[date] = None
    passengers_adults: int = 1
    cabin_class: Optional[str] = None


class HotelSearchCacheSeed(_SearchCacheSeed):
    location: str
    check_in: date
    check_out: date
    guests: int = 1
    rooms: int = 1


class BookingSeed(BaseModel):
    id: UUID
    user_id: UUID
    booking_reference: str
    status: str = "pending"
    payment_status: str = "pending"
    total_amount: Decimal
    currency: str = "USD"
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    chat_session_id: Optional[UUID] = None
    confirmed_at: Optional[datetime] = None


class FlightBookingSeed(BaseModel):
    id: UUID
    booking_reference: str
    airline_code: str
    airline_name: Optional[str] = None
    flight_number: str
    origin: str
    destination: str
    departure_time: datetime
    arrival_time: datetime
    cabin_class: Optional[str] = None
    passengers: List[JsonDocument]
    passenger_count: int
    external_booking_id: Optional[str] = None


class HotelBookingSeed(BaseModel):
    id: UUID
    booking_reference: str
    hotel_id: str
    hotel_name: str
    hotel_address: Optional[str] = None
    hotel_rating: Optional[float] = None
    room_type: Optional[str] = None
    check_in: date
    check_out: date
    nights: int
    guests: int = 1
    rooms: int = 1
    breakfast_included: bool = False
    guests_details: List[JsonDocument] = []
    external_booking_id: Optional[str] = None


class BookingItemSeed(BaseModel):
    """A line of a booking pointing at exactly one flight or hotel detail record."""
    booking_id: UUID
    item_type: Literal["flight", "hotel"]
    item_sequence: int = 1
    flight_booking_id: Optional[UUID] = None
    hotel_booking_id: Optional[UUID] = None
    item_price: Decimal

    @model_validator(mode="after")
    def exactly_one_detail_record(self):
        if (self.flight_booking_id is None) == (self.hotel_booking_id is None):
            raise ValueError("exactly one of flight_booking_id / hotel_booking_id must be set")
        expected = "flight" if self.flight_booking_id is not None else "hotel"
        if self.item_type != expected:
            raise ValueError(f"item_type {self.item_type!r} does not match {expected} reference")
        return self


class AnalyticsEventSeed(BaseModel):
    event_type: str
    user_id: Optional[UUID] = None
    session_id: Optional[str] = None
    event_data: JsonDocument = {}
