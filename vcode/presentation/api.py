from fastapi import APIRouter

from vcode.presentation.routers.v1.code import router as code_router
from vcode.presentation.routes.health import router as health_router

api = APIRouter()
api.include_router(health_router)

# Add all v1 routers here
routers = (code_router,)
for router in routers:
    api.include_router(router, prefix="/v1")
