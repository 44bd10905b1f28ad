# favfilms/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter, Depends

from favfilms.common.settings import Settings
from favfilms.database.core.main import Database
from favfilms.services.api.deps import get_app_settings, get_database

router = APIRouter(tags=["health"])

@router.get("/healthz")
def healthz(s: Settings = Depends(get_app_settings), database: Database = Depends(get_database)):
    db_ok = database.health_check()
    return {
        "ok": db_ok,
        "app": s.app_name,
        "env": s.app_env,
        "database": "connected" if db_ok else "disconnected",
    }
