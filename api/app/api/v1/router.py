"""
Router principal de la API v1.
Agrupa todos los endpoints de la versión 1.
"""
from fastapi import APIRouter

from app.api.v1.endpoints import business_partners


# Router principal de la API v1
api_router = APIRouter(prefix="/v1")

api_router.include_router(business_partners.router)
