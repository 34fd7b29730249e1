from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    JSON,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship
import uuid
from travelhub.core.database import Base, utcnow


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "(data_processing_consent AND consent_granted_at IS NOT NULL) "
            "OR (NOT data_processing_consent AND consent_granted_at IS NULL)",
            name="ck_users_consent_timestamp",
        ),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False, index=True)
    full_name = Column(String(255))
    role = Column(String(50), nullable=False, default="user")  # user, admin
    status = Column(String(50), nullable=False, default="active")
    data_processing_consent = Column(Boolean, nullable=False, default=False)
    consent_granted_at = Column(DateTime)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    oauth_accounts = relationship("OAuthAccount", back_populates="user")
    chat_sessions = relationship("ChatSession", back_populates="user")
    bookings = relationship("Booking", back_populates="user")
    analytics_events = relationship("AnalyticsEvent", back_populates="user")


class OAuthAccount(Base):
    __tablename__ = "oauth_accounts"
    __table_args__ = (
        UniqueConstraint("provider", "provider_user_id", name="uq_oauth_provider_user"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    provider = Column(String(50), nullable=False)  # google, ...
    provider_user_id = Column(String(255), nullable=False)
    provider_email = Column(String(255))
    created_at = Column(DateTime, default=utcnow)

    user = relationship("User", back_populates="oauth_accounts")


class ChatSession(Base):
    __tablename__ = "chat_sessions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255))
    status = Column(String(50), nullable=False, default="active")
    thread_id = Column(String(255))

    # free-form conversation state, e.g. destination and detected intent
    context = Column(JSON)
    message_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="chat_sessions")
    messages = relationship("ChatMessage", back_populates="session")


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id = Column(Uuid, ForeignKey("chat_sessions.id"), nullable=False, index=True)
    role = Column(String(20), nullable=False)  # user, ai, system
    content = Column(Text, nullable=False)
    model = Column(String(100))
    tokens_total = Column(Integer)
    latency_ms = Column(Integer)
    created_at = Column(DateTime, default=utcnow)

    session = relationship("ChatSession", back_populates="messages")


class FlightSearchCache(Base):
    __tablename__ = "flight_search_cache"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    search_hash = Column(String(64), unique=True, nullable=False, index=True)

    origin = Column(String(3), nullable=False)
    destination = Column(String(3), nullable=False)
    departure_date = Column(Date, nullable=False)
    return_date = Column(Date)
    passengers_adults = Column(Integer, nullable=False, default=1)
    cabin_class = Column(String(50))

    results = Column(JSON, nullable=False)
    result_count = Column(Integer, nullable=False, default=0)
    expires_at = Column(DateTime, nullable=False)
    hit_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow)


class HotelSearchCache(Base):
    __tablename__ = "hotel_search_cache"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    search_hash = Column(String(64), unique=True, nullable=False, index=True)

    location = Column(String(255), nullable=False)
    check_in = Column(Date, nullable=False)
    check_out = Column(Date, nullable=False)
    guests = Column(Integer, nullable=False, default=1)
    rooms = Column(Integer, nullable=False, default=1)

    results = Column(JSON, nullable=False)
    result_count = Column(Integer, nullable=False, default=0)
    expires_at = Column(DateTime, nullable=False)
    hit_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow)


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    booking_reference = Column(String(50), unique=True, nullable=False, index=True)
    status = Column(String(50), nullable=False, default="pending")
    payment_status = Column(String(50), nullable=False, default="pending")
    total_amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    contact_email = Column(String(255))
    contact_phone = Column(String(50))
    chat_session_id = Column(Uuid, ForeignKey("chat_sessions.id"))
    confirmed_at = Column(DateTime)
    created_at = Column(DateTime, default=utcnow)

    user = relationship("User", back_populates="bookings")
    chat_session = relationship("ChatSession")
    items = relationship("BookingItem", back_populates="booking")


class FlightBooking(Base):
    __tablename__ = "flight_bookings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    booking_reference = Column(String(50), nullable=False)
    airline_code = Column(String(3), nullable=False)
    airline_name = Column(String(255))
    flight_number = Column(String(20), nullable=False)
    origin = Column(String(3), nullable=False)
    destination = Column(String(3), nullable=False)
    departure_time = Column(DateTime, nullable=False)
    arrival_time = Column(DateTime, nullable=False)
    cabin_class = Column(String(50))

    # [{"name": ..., "type": "adult", "price": ...}]
    passengers = Column(JSON, nullable=False)
    passenger_count = Column(Integer, nullable=False, default=1)
    external_booking_id = Column(String(255))
    created_at = Column(DateTime, default=utcnow)


class HotelBooking(Base):
    __tablename__ = "hotel_bookings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    booking_reference = Column(String(50), nullable=False)
    hotel_id = Column(String(100), nullable=False)
    hotel_name = Column(String(255), nullable=False)
    hotel_address = Column(Text)
    hotel_rating = Column(Float)
    room_type = Column(String(100))
    check_in = Column(Date, nullable=False)
    check_out = Column(Date, nullable=False)
    nights = Column(Integer, nullable=False)
    guests = Column(Integer, nullable=False, default=1)
    rooms = Column(Integer, nullable=False, default=1)
    breakfast_included = Column(Boolean, nullable=False, default=False)
    guests_details = Column(JSON)
    external_booking_id = Column(String(255))
    created_at = Column(DateTime, default=utcnow)


class BookingItem(Base):
    __tablename__ = "booking_items"
    __table_args__ = (
        CheckConstraint(
            "(item_type = 'flight' AND flight_booking_id IS NOT NULL AND hotel_booking_id IS NULL) "
            "OR (item_type = 'hotel' AND hotel_booking_id IS NOT NULL AND flight_booking_id IS NULL)",
            name="ck_booking_items_detail_ref",
        ),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    booking_id = Column(Uuid, ForeignKey("bookings.id"), nullable=False, index=True)
    item_type = Column(String(20), nullable=False)  # flight, hotel
    item_sequence = Column(Integer, nullable=False, default=1)
    flight_booking_id = Column(Uuid, ForeignKey("flight_bookings.id"))
    hotel_booking_id = Column(Uuid, ForeignKey("hotel_bookings.id"))
    item_price = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, default=utcnow)

    booking = relationship("Booking", back_populates="items")
    flight_booking = relationship("FlightBooking")
    hotel_booking = relationship("HotelBooking")


class AnalyticsEvent(Base):
    __tablename__ = "analytics_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_type = Column(String(100), nullable=False, index=True)
    user_id = Column(Uuid, ForeignKey("users.id"), index=True)
    session_id = Column(String(255))  # web session, not a chat session
    event_data = Column(JSON)
    created_at = Column(DateTime, default=utcnow)

    user = relationship("User", back_populates="analytics_events")
