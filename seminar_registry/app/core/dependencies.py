"""
FastAPI dependencies that hand application state to route handlers.

The store, gateway and designer are created per application in
``create_app`` and read back from ``request.app.state`` here, so
separate app instances (for example in tests) never share data.
"""

from fastapi import Depends, Request

from ..services.certificate_service import CertificateService
from ..services.design_service import CertificateDesignService
from ..services.gateway import SeminarGateway


def get_gateway(request: Request) -> SeminarGateway:
    return request.app.state.gateway


def get_design_service(request: Request) -> CertificateDesignService:
    return request.app.state.design_service


def get_certificate_service(gateway: SeminarGateway = Depends(get_gateway)) -> CertificateService:
    return CertificateService(gateway)
