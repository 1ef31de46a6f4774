"""
Sycamore Backend — Documentation Route
========================================

What:  GET /api/docs returns the API documentation file as JSON.
How:   Delegates the read to DocumentationService; a failed read raises
       DocumentationNotFoundError, which the global handler turns into
       404 {success: false, error: "Documentation not found."}.
"""

from fastapi import APIRouter, Depends

from app.config import settings
from app.schemas.member import DocumentationErrorResponse, DocumentationResponse
from app.services.documentation_service import DocumentationService

router = APIRouter(prefix="/api", tags=["Documentation"])


def get_documentation_service() -> DocumentationService:
    """Builds the service from the configured path (resolved against the CWD at read time)."""
    return DocumentationService(settings.documentation_path)


@router.get(
    "/docs",
    response_model=DocumentationResponse,
    responses={
        200: {"description": "Documentation text", "model": DocumentationResponse},
        404: {"description": "Documentation file missing or unreadable", "model": DocumentationErrorResponse},
    },
    summary="Get the API documentation",
)
async def get_documentation(
    service: DocumentationService = Depends(get_documentation_service),
) -> DocumentationResponse:
    content = await service.read()
    return DocumentationResponse(success=True, documentation=content)
