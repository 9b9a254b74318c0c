"""
FastAPI backend: list, detail, create and delete views over the contact directory.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
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

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import RedirectResponse
from neo4j import GraphDatabase
from pydantic import BaseModel

from agenda.application import (
    ContactDetailView,
    ContactForm,
    ContactListView,
    ContactRepository,
    ContactService,
    DeleteCancelled,
    KeyValueStorage,
    PendingNotFound,
)
from agenda.infrastructure import (
    InMemoryStorage,
    JsonFileStorage,
    LocalContactStore,
    Neo4jStorage,
    SeedLoader,
    ensure_storage_constraint,
)
from api.messages import get_messages
from api.xstate_machine import get_machine

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_STORAGE_PATH = ".storage/local_storage.json"
DEFAULT_SEED_SOURCE = "data/contacts.json"


def _resolve_path(value: str) -> str:
    """Relative paths are taken from the repo root; URLs and absolute paths pass through."""
    if value.startswith(("http://", "https://")) or Path(value).is_absolute():
        return value
    return str(REPO_ROOT / value)


def _get_driver():
    uri = os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip()
    user = os.environ.get("NEO4J_USER", "neo4j").strip()
    password = os.environ.get("NEO4J_PASSWORD", "password").strip()
    return GraphDatabase.driver(uri, auth=(user, password))


def get_storage(app: FastAPI) -> KeyValueStorage:
    kind = os.environ.get("AGENDA_STORAGE", "file").strip().lower()
    if kind == "memory":
        logger.info("Using in-memory storage; contacts are lost on exit")
        return InMemoryStorage()
    if kind == "neo4j":
        if getattr(app.state, "driver", None) is None:
            app.state.driver = _get_driver()
            ensure_storage_constraint(app.state.driver)
        logger.info("Using Neo4j storage")
        return Neo4jStorage(app.state.driver)
    if kind != "file":
        raise ValueError(f"Unknown AGENDA_STORAGE '{kind}'")
    path = _resolve_path(
        os.environ.get("AGENDA_STORAGE_PATH", "").strip() or DEFAULT_STORAGE_PATH
    )
    logger.info("Using file storage at %s", path)
    return JsonFileStorage(path)


def build_service(app: FastAPI) -> ContactService:
    seed_source = _resolve_path(
        os.environ.get("AGENDA_SEED_SOURCE", "").strip() or DEFAULT_SEED_SOURCE
    )
    repo = ContactRepository(
        LocalContactStore(get_storage(app)),
        SeedLoader(seed_source),
    )
    return ContactService(repo, messages=get_messages(), confirmation=get_machine())


def get_service(app: FastAPI) -> ContactService:
    if getattr(app.state, "service", None) is None:
        app.state.service = build_service(app)
    return app.state.service


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        get_service(app)
        yield
    finally:
        if getattr(app.state, "driver", None) is not None:
            app.state.driver.close()
            app.state.driver = None


app = FastAPI(title="Agenda API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- Views ---


@app.get("/")
async def contact_list(request: Request) -> ContactListView:
    return await get_service(request.app).list_view()


@app.get("/detail")
async def contact_detail(
    request: Request,
    raw_id: str | None = Query(None, alias="id"),
) -> ContactDetailView:
    return await get_service(request.app).detail_view(raw_id)


# --- Create ---


class CreateContactBody(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""


@app.post("/contacts")
async def create_contact(body: CreateContactBody, request: Request):
    service = get_service(request.app)
    created = await service.create_contact(
        ContactForm(name=body.name, email=body.email, phone=body.phone)
    )
    logger.info("Created contact %s", created.contact_id)
    return RedirectResponse(url="/", status_code=303)


# --- Delete (two-step confirmation) ---


class ConfirmDeleteBody(BaseModel):
    confirm: bool


@app.post("/contacts/{contact_id}/delete")
def request_delete(contact_id: int, request: Request):
    pending = get_service(request.app).request_delete(contact_id)
    return {
        "pending_id": pending.pending_id,
        "contact_id": pending.contact_id,
        "prompt": pending.prompt,
    }


@app.post("/delete-confirmations/{pending_id}")
async def resolve_delete(pending_id: str, body: ConfirmDeleteBody, request: Request):
    result = await get_service(request.app).resolve_delete(pending_id, body.confirm)
    if isinstance(result, PendingNotFound):
        raise HTTPException(status_code=404, detail="No pending delete")
    if isinstance(result, DeleteCancelled):
        return {"status": "cancelled", "contact_id": result.contact_id}
    logger.info("Delete %s confirmed", pending_id)
    return result
