# vaultkeep/app/api/v1/router.py
from fastapi import APIRouter
from vaultkeep.app.api.v1.endpoints import vault

api_router = APIRouter()
api_router.include_router(vault.router, prefix="/vault", tags=["vault"])
