from fastapi import APIRouter

from app.api.routes import network, utils

api_router = APIRouter()
api_router.include_router(utils.router, tags=["utils"])
api_router.include_router(network.router, tags=["network"])
