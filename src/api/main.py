"""
FastAPI backend: REST API over the in-memory contact list.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from fastapi import FastAPI, HTTPException, Query, Request, Response  # noqa: E402
from pydantic import BaseModel  # noqa: E402

from contactlist.application import (  # noqa: E402
    ContactAdded,
    ContactFormData,
    ContactNotFound,
    ContactService,
    ContactUpdated,
    DuplicateContactId,
    Invalid,
)
from contactlist.domain import (  # noqa: E402
    Contact,
    ContactFilter,
    ContactPriority,
    ContactStats,
    ContactStatus,
)
from contactlist.infrastructure import (  # noqa: E402
    DEFAULT_PHONE_REGION,
    InMemoryContactStore,
    normalize_phone,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _resolve_log_level(name: str) -> int:
    """Map a level name (e.g. "debug") to its number; unknown names fall back to INFO."""
    cleaned = (name or "").strip().upper()
    if not cleaned:
        return logging.INFO
    level = logging.getLevelName(cleaned)
    if not isinstance(level, int):
        logger.warning("Unknown LOG_LEVEL %r, using INFO", name)
        return logging.INFO
    return level


@dataclass(frozen=True)
class ApiSettings:
    """Runtime settings read from the environment."""

    phone_region: str | None = DEFAULT_PHONE_REGION
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls) -> "ApiSettings":
        region = os.environ.get("CONTACTS_PHONE_REGION", DEFAULT_PHONE_REGION).strip().upper()
        return cls(
            phone_region=region or None,
            log_level=_resolve_log_level(os.environ.get("LOG_LEVEL", "INFO")),
        )


# --- Request / response bodies ---


class ContactBody(BaseModel):
    full_name: str
    email: str
    phone: str
    status: ContactStatus = ContactStatus.PENDING
    priority: ContactPriority = ContactPriority.NORMAL


class ContactItem(BaseModel):
    id: str
    full_name: str
    email: str
    phone: str
    phone_e164: str | None = None
    status: ContactStatus
    priority: ContactPriority
    created_at: str


class StatsItem(BaseModel):
    total: int
    pending: int
    completed: int
    urgent: int
    important: int


def _to_item(contact: Contact, settings: ApiSettings) -> ContactItem:
    return ContactItem(
        id=contact.id,
        full_name=contact.full_name,
        email=contact.email,
        phone=contact.phone,
        phone_e164=normalize_phone(contact.phone, default_region=settings.phone_region),
        status=contact.status,
        priority=contact.priority,
        created_at=contact.created_at.isoformat(),
    )


def _to_stats_item(stats: ContactStats) -> StatsItem:
    return StatsItem(
        total=stats.total,
        pending=stats.pending,
        completed=stats.completed,
        urgent=stats.urgent,
        important=stats.important,
    )


def _form_from_body(body: ContactBody) -> ContactFormData:
    return ContactFormData(
        full_name=body.full_name,
        email=body.email,
        phone=body.phone,
        status=body.status,
        priority=body.priority,
    )


def get_service(request: Request) -> ContactService:
    return request.app.state.service


def get_settings(request: Request) -> ApiSettings:
    return request.app.state.settings


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    """Build an app that owns its own store and service (no shared module state)."""
    settings = settings or ApiSettings.from_env()
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.settings = settings
        app.state.service = ContactService(InMemoryContactStore())
        logger.info(
            "Contact list ready (phone region: %s). State is in memory only.",
            app.state.settings.phone_region,
        )
        try:
            yield
        finally:
            app.state.service = None

    app = FastAPI(title="Contact List API", lifespan=lifespan)

    # --- REST: health ---

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # --- REST: contacts ---

    @app.get("/contacts", response_model=list[ContactItem])
    def list_contacts(
        request: Request,
        contact_filter: ContactFilter = Query(ContactFilter.ALL, alias="filter"),
    ):
        service = get_service(request)
        current = get_settings(request)
        return [_to_item(c, current) for c in service.filter_contacts(contact_filter)]

    @app.get("/contacts/stats", response_model=StatsItem)
    def contact_stats(request: Request):
        return _to_stats_item(get_service(request).stats())

    @app.get("/contacts/{contact_id}", response_model=ContactItem)
    def get_contact(contact_id: str, request: Request):
        contact = get_service(request).get_contact(contact_id)
        if contact is None:
            raise HTTPException(status_code=404, detail="Contact not found")
        return _to_item(contact, get_settings(request))

    @app.post("/contacts", response_model=ContactItem, status_code=201)
    def create_contact(body: ContactBody, request: Request):
        result = get_service(request).create_contact(_form_from_body(body))
        if isinstance(result, Invalid):
            raise HTTPException(status_code=400, detail=result.reason)
        if isinstance(result, DuplicateContactId):
            raise HTTPException(status_code=409, detail="Contact already exists")
        if not isinstance(result, ContactAdded):
            raise HTTPException(status_code=400, detail="Failed to create contact")
        return _to_item(result.contact, get_settings(request))

    @app.put("/contacts/{contact_id}", response_model=ContactItem)
    def update_contact(contact_id: str, body: ContactBody, request: Request):
        result = get_service(request).update_contact(contact_id, _form_from_body(body))
        if isinstance(result, Invalid):
            raise HTTPException(status_code=400, detail=result.reason)
        if isinstance(result, ContactNotFound):
            raise HTTPException(status_code=404, detail="Contact not found")
        if not isinstance(result, ContactUpdated):
            raise HTTPException(status_code=400, detail="Failed to update contact")
        return _to_item(result.contact, get_settings(request))

    @app.delete("/contacts/{contact_id}", status_code=204)
    def delete_contact(contact_id: str, request: Request):
        get_service(request).remove(contact_id)
        return Response(status_code=204)

    return app


app = create_app()
