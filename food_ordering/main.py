"""
FastAPI Application Entry Point

Food Ordering Backend.

Endpoints:
    - POST   /insert: Add a menu item
    - GET    /read: List menu items
    - PUT    /update: Rename a menu item
    - DELETE /delete/{id}: Remove a menu item
    - POST   /seed: Insert the twelve default menu items
    - POST   /api/contact: Store a contact message and email an acknowledgment
    - POST   /api/order: Store an order
    - GET    /health: System health check

Every handler catches its own failures and turns them into a flat
message with a status code. Missing bodies count as empty; bodies that
cannot be read at all get a flat 400. There is no catch-all handler.
"""

import logging
from datetime import datetime
from typing import Optional
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Depends, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from food_ordering.core.config import get_settings, setup_logging
from food_ordering.database import get_db, init_engine, init_db, dispose_db
from food_ordering.models import PAYMENT_SUCCESS
from food_ordering.repositories import (
    MenuItemRepository,
    ContactRepository,
    OrderRepository,
)
from food_ordering.schemas import (
    MenuItemCreate,
    MenuItemRename,
    MenuItemResponse,
    ContactCreate,
    OrderCreate,
    MessageResponse,
    HealthResponse,
)
from food_ordering.seed_data import MENU_SEED
from food_ordering.services.notifications import (
    BaseNotificationService,
    get_notification_service,
)

# Initialize configuration and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.

    Neither an unreachable database nor a failing mail check stops the
    server from starting; both are only logged.
    """
    settings = get_settings()

    # Startup
    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    init_engine(settings.database_url, echo=settings.debug)
    if not await init_db():
        logger.warning("⚠️ Serving without a database; requests will fail until it is reachable")

    notification_service = get_notification_service()
    if await notification_service.health_check():
        logger.info(f"✅ Mail Service ready: {notification_service.provider_name}")
    else:
        logger.error(f"❌ Mail Service check failed: {notification_service.provider_name}")

    if settings.use_real_services:
        missing = settings.validate_production_config()
        if missing:
            logger.warning(f"⚠️ Missing production config: {missing}")

    logger.info(f"✅ Application ready on port {settings.api_port}")

    yield  # Application runs

    # Shutdown
    logger.info("Shutting down...")
    await dispose_db()
    logger.info("✅ Cleanup complete")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description="Menu management, contact messages and orders for a food-ordering site.",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


def server_error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"message": message})


# =============================================================================
# ROOT & HEALTH ENDPOINTS
# =============================================================================

@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """API root with navigation links."""
    return {
        "message": f"🍔 Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.env_mode.value,
        "documentation": "/docs",
        "health": "/health",
    }


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="System Health Check",
)
async def health_check(
    db: AsyncSession = Depends(get_db),
    notification_service: BaseNotificationService = Depends(get_notification_service),
) -> HealthResponse:
    """Verify the database and mail service answer."""

    db_status = "healthy"
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"
        logger.error(f"Database health check failed: {e}")

    mail_status = "healthy" if await notification_service.health_check() else "unhealthy"

    overall = "operational" if db_status == mail_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall,
        database=db_status,
        mail_service=mail_status,
        timestamp=datetime.now(),
    )


# =============================================================================
# MENU ENDPOINTS
# =============================================================================

@app.post(
    "/insert",
    response_model=MenuItemResponse,
    tags=["Menu"],
    summary="Add Menu Item",
)
async def insert_food(
    payload: Optional[MenuItemCreate] = None,
    db: AsyncSession = Depends(get_db),
):
    """Store one menu item and return it with its assigned id."""
    payload = payload or MenuItemCreate()
    try:
        item = await MenuItemRepository(db).create(**payload.model_dump())
    except Exception as e:
        logger.exception(f"Error inserting food: {e}")
        return PlainTextResponse("Error inserting food", status_code=500)

    logger.info(f"Menu item {item.id} inserted: {item.food_name}")
    return MenuItemResponse.model_validate(item)


@app.get(
    "/read",
    response_model=list[MenuItemResponse],
    tags=["Menu"],
    summary="List Menu Items",
)
async def read_food(db: AsyncSession = Depends(get_db)):
    """All menu items in insertion order. No pagination."""
    try:
        items = await MenuItemRepository(db).list()
    except Exception as e:
        logger.exception(f"Error reading food: {e}")
        return PlainTextResponse("Error reading food", status_code=500)

    return [MenuItemResponse.model_validate(item) for item in items]


@app.put(
    "/update",
    response_class=PlainTextResponse,
    tags=["Menu"],
    summary="Rename Menu Item",
)
async def update_food(
    payload: Optional[MenuItemRename] = None,
    db: AsyncSession = Depends(get_db),
):
    """Replace the name of one menu item; nothing else changes."""
    payload = payload or MenuItemRename()
    try:
        item = None
        if payload.id:
            item = await MenuItemRepository(db).update(
                payload.id, food_name=payload.new_food_name
            )
    except Exception as e:
        logger.exception(f"Error updating food: {e}")
        return PlainTextResponse("Error updating food", status_code=500)

    if item is None:
        return PlainTextResponse("Food not found", status_code=404)

    logger.info(f"Menu item {item.id} renamed to {item.food_name}")
    return PlainTextResponse("Food updated")


@app.delete(
    "/delete/{item_id}",
    response_class=PlainTextResponse,
    tags=["Menu"],
    summary="Delete Menu Item",
)
async def delete_food(
    item_id: str,
    db: AsyncSession = Depends(get_db),
):
    try:
        deleted = await MenuItemRepository(db).delete_by_id(item_id)
    except Exception as e:
        logger.exception(f"Error deleting food: {e}")
        return PlainTextResponse("Error deleting food", status_code=500)

    if not deleted:
        return PlainTextResponse("Food not found", status_code=404)

    logger.info(f"Menu item {item_id} deleted")
    return PlainTextResponse("Food deleted")


@app.post(
    "/seed",
    response_class=PlainTextResponse,
    tags=["Menu"],
    summary="Seed Menu Items",
)
async def seed_food(db: AsyncSession = Depends(get_db)):
    """
    Insert the default menu in one batch.

    Not idempotent: every call adds all twelve items again.
    """
    try:
        items = await MenuItemRepository(db).create_many(MENU_SEED)
    except Exception as e:
        logger.exception(f"Error seeding food items: {e}")
        return PlainTextResponse("Error seeding food items", status_code=500)

    logger.info(f"Seeded {len(items)} menu items")
    return PlainTextResponse("Seeded menu items")


# =============================================================================
# CONTACT ENDPOINT
# =============================================================================

@app.post(
    "/api/contact",
    response_model=MessageResponse,
    tags=["Contact"],
    summary="Submit Contact Form",
)
async def submit_contact(
    payload: Optional[ContactCreate] = None,
    db: AsyncSession = Depends(get_db),
    notification_service: BaseNotificationService = Depends(get_notification_service),
    idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key"),
):
    """
    Store a contact message, then email an acknowledgment to the sender.

    The record is written before the email is attempted and is kept if
    the email fails, so the caller sees a 500 for a message that was
    stored. Retrying with the same ``Idempotency-Key`` header re-sends the
    email without storing the message again; without the header every
    retry stores a new copy.
    """
    payload = payload or ContactCreate()
    missing = payload.missing_fields()
    if missing:
        logger.info(f"Contact rejected, missing fields: {missing}")
        return JSONResponse(status_code=400, content={"message": "All fields are required!"})

    try:
        contacts = ContactRepository(db)
        fields = payload.model_dump()

        if idempotency_key:
            contact, created = await contacts.create_once(idempotency_key, **fields)
        else:
            contact, created = await contacts.create(**fields), True

        if created:
            logger.info(f"Contact message {contact.id} stored from {payload.email}")
        else:
            logger.info(f"Contact message {contact.id} already stored for key {idempotency_key}")

        result = await notification_service.send_contact_acknowledgment(
            name=payload.name,
            email=payload.email,
            about=payload.about,
        )
    except Exception as e:
        logger.exception(f"Error handling contact message: {e}")
        return server_error("Server error")

    if not result.success:
        logger.error(f"Acknowledgment email to {payload.email} failed: {result.error_message}")
        return server_error("Server error")

    return MessageResponse(message="Contact saved & email sent!")


# =============================================================================
# ORDER ENDPOINT
# =============================================================================

@app.post(
    "/api/order",
    response_model=MessageResponse,
    tags=["Orders"],
    summary="Submit Order",
)
async def submit_order(
    payload: Optional[OrderCreate] = None,
    db: AsyncSession = Depends(get_db),
):
    """Store an order. No payment is processed; the status is always Success."""
    payload = payload or OrderCreate()
    try:
        order = await OrderRepository(db).create(
            **payload.model_dump(),
            payment_status=PAYMENT_SUCCESS,
        )
    except Exception as e:
        logger.exception(f"Error saving order: {e}")
        return server_error("Error saving order")

    logger.info(f"Order {order.id} saved for {order.name}: {order.product}")
    return MessageResponse(message="Order saved")


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Bodies that cannot be read get a flat 400 instead of a field-by-field 422."""
    logger.info(f"Unreadable body for {request.url.path}: {exc.errors()}")

    if request.url.path == "/api/contact":
        message = "All fields are required!"
    else:
        message = "Invalid request body"

    return JSONResponse(status_code=400, content={"message": message})


def run() -> None:
    """Console entry point."""
    uvicorn.run(
        "food_ordering.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    run()
