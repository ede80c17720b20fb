"""FastAPI router for toast endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from toaster.core.types import ToastVariant
from toaster.notifications.models import Toast
from toaster.notifications.service import ToastService

router = APIRouter()


class EnqueueToastRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    variant: ToastVariant = ToastVariant.DEFAULT
    duration: int | None = None
    template_id: str | None = None
    context: dict[str, Any] | None = None


class UpdateToastRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    variant: ToastVariant | None = None
    duration: int | None = None
    open: bool | None = None


_NON_NULLABLE = ("open", "variant")


def _service(request: Request) -> ToastService:
    service = getattr(request.app.state, "toast_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Toast service not available")
    return service


def _serialize(toast: Toast) -> dict[str, Any]:
    return toast.model_dump(mode="json", exclude={"action"})


def _require(service: ToastService, toast_id: str) -> Toast:
    toast = service.get(toast_id)
    if toast is None:
        raise HTTPException(status_code=404, detail=f"Toast {toast_id!r} not found")
    return toast


@router.get("/api/toasts")
async def list_toasts(request: Request) -> list[dict[str, Any]]:
    """Current toasts, newest first."""
    return [_serialize(t) for t in _service(request).toasts]


@router.post("/api/toasts")
async def enqueue_toast(body: EnqueueToastRequest, request: Request) -> dict[str, Any]:
    service = _service(request)

    if body.template_id:
        engine = getattr(request.app.state, "toast_engine", None)
        if engine is None:
            raise HTTPException(status_code=503, detail="Toast engine not available")
        handle = engine.show(body.template_id, body.context)
    else:
        handle = service.enqueue(
            **body.model_dump(exclude={"template_id", "context"}, exclude_none=True)
        )

    return _serialize(_require(service, handle.id))


@router.patch("/api/toasts/{toast_id}")
async def update_toast(toast_id: str, body: UpdateToastRequest, request: Request) -> dict[str, Any]:
    service = _service(request)
    _require(service, toast_id)
    changes = body.model_dump(exclude_unset=True)
    # Explicit nulls are only meaningful for the nullable display fields.
    for key in _NON_NULLABLE:
        if key in changes and changes[key] is None:
            del changes[key]
    service.update(toast_id, **changes)
    return _serialize(_require(service, toast_id))


@router.post("/api/toasts/dismiss")
async def dismiss_all_toasts(request: Request) -> dict[str, Any]:
    service = _service(request)
    closing = [t.id for t in service.toasts if t.open]
    service.dismiss()
    return {"dismissed": closing}


@router.post("/api/toasts/{toast_id}/dismiss")
async def dismiss_toast(toast_id: str, request: Request) -> dict[str, Any]:
    service = _service(request)
    _require(service, toast_id)
    service.dismiss(toast_id)
    return _serialize(_require(service, toast_id))
