"""FastAPI endpoints for store-wide settings."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from store.api.deps import admin_user
from store.api.schemas import SiteConfigRequest
from store.site.settings import UpdateSiteConfig, load_site_config

router = APIRouter(prefix="/api/config", tags=["config"])


@router.get("")
async def get_config() -> dict:
    return load_site_config().as_settings()


@router.put("", dependencies=[Depends(admin_user)])
async def update_config(body: SiteConfigRequest) -> dict:
    sections = {
        name: json.dumps(value) for name, value in body.model_dump(exclude={"store_name"}).items() if value is not None
    }
    return current_domain.process(UpdateSiteConfig(store_name=body.store_name, **sections), asynchronous=False)
