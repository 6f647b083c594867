from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from phone_authorization.api.routers.authorizations import router as authorizations_router
from phone_authorization.api.routers.permissions import router as permissions_router
from phone_authorization.shared.config import get_settings


logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="Phone Authorization API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(authorizations_router)
app.include_router(permissions_router)
