"""
Page Routes
Page-load payloads aggregated from several backend resources
"""

from fastapi import APIRouter, Depends

from booking_gateway.models.resources import AgendamentosPage, ClientesPage, ServicosPage
from booking_gateway.services.page_loader import PAGES, load_page
from booking_gateway.utils.backend_client import BackendClient
from booking_gateway.utils.dependencies import get_backend_client

router = APIRouter()


@router.get("/agendamentos", response_model=None)
async def agendamentos_page(backend: BackendClient = Depends(get_backend_client)) -> AgendamentosPage:
    """Appointments with the clients and services needed to render them"""
    page = await load_page(backend, PAGES["agendamentos"])
    return page.to_dict()


@router.get("/clientes", response_model=None)
async def clientes_page(backend: BackendClient = Depends(get_backend_client)) -> ClientesPage:
    page = await load_page(backend, PAGES["clientes"])
    return page.to_dict()


@router.get("/servicos", response_model=None)
async def servicos_page(backend: BackendClient = Depends(get_backend_client)) -> ServicosPage:
    page = await load_page(backend, PAGES["servicos"])
    return page.to_dict()
