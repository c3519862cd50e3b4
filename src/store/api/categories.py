"""FastAPI endpoints for the category tree."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from store.api.deps import admin_user, get_or_404
from store.api.schemas import CreateCategoryRequest, ReorderCategoryRequest, UpdateCategoryRequest
from store.api.serializers import category_payload
from store.category.category import Category
from store.category.management import CreateCategory, DeactivateCategory, ReorderCategory, UpdateCategory

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.post("", status_code=201, dependencies=[Depends(admin_user)])
async def create_category(body: CreateCategoryRequest) -> dict:
    category_id = current_domain.process(CreateCategory(**body.model_dump()), asynchronous=False)
    return category_payload(get_or_404(Category, category_id, "Category"))


@router.get("")
async def list_categories() -> list[dict]:
    return [category_payload(c) for c in current_domain.repository_for(Category).active()]


@router.get("/{category_id}")
async def get_category(category_id: str) -> dict:
    return category_payload(get_or_404(Category, category_id, "Category"))


@router.put("/{category_id}", dependencies=[Depends(admin_user)])
async def update_category(category_id: str, body: UpdateCategoryRequest) -> dict:
    get_or_404(Category, category_id, "Category")
    current_domain.process(UpdateCategory(category_id=category_id, **body.model_dump()), asynchronous=False)
    return category_payload(get_or_404(Category, category_id, "Category"))


@router.put("/{category_id}/reorder", dependencies=[Depends(admin_user)])
async def reorder_category(category_id: str, body: ReorderCategoryRequest) -> dict:
    get_or_404(Category, category_id, "Category")
    current_domain.process(
        ReorderCategory(category_id=category_id, new_display_order=body.new_display_order),
        asynchronous=False,
    )
    return category_payload(get_or_404(Category, category_id, "Category"))


@router.put("/{category_id}/deactivate", dependencies=[Depends(admin_user)])
async def deactivate_category(category_id: str) -> dict:
    get_or_404(Category, category_id, "Category")
    current_domain.process(DeactivateCategory(category_id=category_id), asynchronous=False)
    return category_payload(get_or_404(Category, category_id, "Category"))
