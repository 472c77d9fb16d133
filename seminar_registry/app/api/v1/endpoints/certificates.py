"""
Certificate designer endpoints for API v1.

The designer asks the AI image service for a certificate background.
The latest result is kept in memory and used by the certificate
endpoint until it is replaced or cleared.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from seminar_registry.app.core.dependencies import get_design_service
from seminar_registry.app.core.errors import ExternalServiceError, ValidationError
from seminar_registry.app.schemas.certificate import CertificateDesignCreate, CertificateDesignRead
from seminar_registry.app.services.design_service import CertificateDesignService


router = APIRouter()


@router.get("/design", response_model=CertificateDesignRead)
async def get_design(
    designer: CertificateDesignService = Depends(get_design_service),
) -> CertificateDesignRead:
    return CertificateDesignRead(background_url=designer.current_background)


@router.post("/design", response_model=CertificateDesignRead)
async def generate_design(
    design: CertificateDesignCreate,
    designer: CertificateDesignService = Depends(get_design_service),
) -> CertificateDesignRead:
    """Generate a new certificate background.

    Input problems (empty prompt, unsupported or oversized reference
    image) return 400.  Failures of the image service return 502 with
    the upstream message.
    """
    try:
        url = await designer.generate_background(design.prompt, design.reference_image)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except ExternalServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to generate certificate: {e}",
        ) from e
    return CertificateDesignRead(background_url=url)


@router.delete("/design", status_code=status.HTTP_204_NO_CONTENT)
async def clear_design(designer: CertificateDesignService = Depends(get_design_service)) -> None:
    designer.clear_background()
    return None
