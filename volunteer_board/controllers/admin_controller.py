# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: Admin listing and CSV export behind the shared password."""
from fastapi import APIRouter, Depends
from starlette.responses import Response

from volunteer_board.core.dependencies import get_admin_service
from volunteer_board.schemas import AdminListing, AdminLogin, RegistrationOut
from volunteer_board.services.admin_service import AdminService

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.post("", response_model=AdminListing)
def admin_listing(body: AdminLogin, admin: AdminService = Depends(get_admin_service)):
    result = admin.grouped(body.password)
    data = {
        date: [
            RegistrationOut(
                id=r.id, date=r.date, first_name=r.first_name, last_name=r.last_name,
                phone_number=r.phone_number, created_at=r.created_at.isoformat(),
            )
            for r in registrations
        ]
        for date, registrations in result["data"].items()
    }
    return AdminListing(data=data, total=result["total"])


@router.post("/export")
def admin_export(body: AdminLogin, admin: AdminService = Depends(get_admin_service)):
    content = admin.export_csv(body.password)
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{admin.export_filename()}"',
            "Cache-Control": "no-store",
        },
    )
