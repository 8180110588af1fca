"""Maintenance endpoints for export and debug reset."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

if TYPE_CHECKING:
    from meal_vault.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/export")
async def export_data(request: Request) -> dict[str, object]:
    """Return every stored record."""
    container: AppContainer = request.app.state.container
    return await container.admin_service.export_data()


@router.post("/clear")
async def clear_all_data(request: Request) -> dict[str, str]:
    """Delete all stored data, including history."""
    container: AppContainer = request.app.state.container
    await container.admin_service.clear_all_data()
    return {"status": "ok"}
