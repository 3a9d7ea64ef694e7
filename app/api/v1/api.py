from fastapi import APIRouter

from app.api.v1.endpoints import (
    projects,
    users,
    health,
)

api_router = APIRouter()

# ==============================================================================
# 1. Core (프로젝트 / ToDo / export·import)
# ==============================================================================
api_router.include_router(projects.router, tags=["Projects"])

# ==============================================================================
# 2. User Roster
# ==============================================================================
api_router.include_router(users.router, tags=["Users"])

# ==============================================================================
# 3. System (헬스 체크)
# ==============================================================================
api_router.include_router(health.router, tags=["Health"])
