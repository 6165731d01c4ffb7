from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from app.api.auth import require_manager, require_viewer
from app.limits import api_limit, report_limit
from app.models.user import User
from app.schemas.common import ApiResponse
from app.schemas.report import InventoryReportRow, LowStockReportRow, MovementReportRow
from app.services import report_service
from app.services.report_renderer import render_csv, render_pdf
from app.store import InventoryStore, get_store

router = APIRouter(
    prefix="/reports",
    tags=["Reports"],
    dependencies=[Depends(api_limit), Depends(report_limit)],
)

ReportFormat = Literal["json", "csv", "pdf"]


def _download(rows: list[dict], fmt: str, title: str, columns: list[tuple[str, str]], filename: str) -> Response:
    if fmt == "csv":
        return Response(
            content=render_csv(rows, columns),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}.csv"'},
        )
    return Response(
        content=render_pdf(rows, title, columns),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}.pdf"'},
    )


@router.get("/low-stock", response_model=ApiResponse[list[LowStockReportRow]])
def low_stock_report(
    format: ReportFormat = "json",
    user: User = Depends(require_manager),
    store: InventoryStore = Depends(get_store),
):
    rows = report_service.low_stock_report(store)
    if format != "json":
        return _download(rows, format, "Low Stock Report", report_service.LOW_STOCK_COLUMNS, "low-stock-report")
    return ApiResponse[list[LowStockReportRow]](message="Low stock report generated successfully", data=rows)


@router.get("/inventory", response_model=ApiResponse[list[InventoryReportRow]])
def inventory_report(
    format: ReportFormat = "json",
    user: User = Depends(require_viewer),
    store: InventoryStore = Depends(get_store),
):
    rows = report_service.inventory_report(store)
    if format != "json":
        return _download(rows, format, "Inventory Report", report_service.INVENTORY_COLUMNS, "inventory-report")
    return ApiResponse[list[InventoryReportRow]](message="Inventory report generated successfully", data=rows)


@router.get("/movements", response_model=ApiResponse[list[MovementReportRow]])
def movement_report(
    days: int = Query(30, ge=1),
    format: ReportFormat = "json",
    user: User = Depends(require_manager),
    store: InventoryStore = Depends(get_store),
):
    rows = report_service.movement_report(store, days=days)
    if format != "json":
        return _download(
            rows,
            format,
            f"Inventory Movement Report ({days} days)",
            report_service.MOVEMENT_COLUMNS,
            f"movement-report-{days}days",
        )
    return ApiResponse[list[MovementReportRow]](message="Movement report generated successfully", data=rows)
