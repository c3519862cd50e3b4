"""FastAPI endpoints for the product catalogue.

Admin writes arrive as multipart forms so images can be uploaded alongside
the product fields.
"""

import json

from fastapi import APIRouter, Depends, File, Query, Request, Response, UploadFile
from fastapi.exceptions import RequestValidationError
from protean.utils.globals import current_domain
from pydantic import ValidationError as PydanticValidationError

from store.api.deps import admin_user, get_or_404
from store.api.schemas import CreateProductForm, MessageResponse, ProductFormRequest, UpdateProductForm
from store.api.serializers import product_payload
from store.api.uploads import delete_image, save_images
from store.product.creation import CreateProduct
from store.product.details import UpdateProductDetails
from store.product.images import RemoveProductImage
from store.product.product import Product
from store.product.removal import RemoveProduct
from store.shared.text import split_csv

router = APIRouter(prefix="/api/products", tags=["products"])


def _flag(value: str | None) -> bool | None:
    """`"true"`/`"false"` form values; anything else means "not supplied"."""
    if value is None:
        return None
    value = value.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def _csv_json(value: str | None) -> str | None:
    return json.dumps(split_csv(value)) if value is not None else None


async def _form_fields(request: Request) -> dict[str, str]:
    """Text fields of the multipart body. Blank values count as not supplied."""
    form = await request.form()
    return {key: value for key, value in form.multi_items() if isinstance(value, str) and value != ""}


def _parse_form(model: type[ProductFormRequest], fields: dict[str, str]) -> ProductFormRequest:
    try:
        return model.model_validate(fields)
    except PydanticValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


def _command_fields(form: ProductFormRequest) -> dict:
    """Keyword arguments for a product command, holding only what the form supplied."""
    fields = form.model_dump(exclude_none=True)
    for name in ("sizes", "colors", "tags"):
        if name in fields:
            fields[name] = _csv_json(fields[name])
    for name in ("featured", "in_stock"):
        if name in fields:
            flag = _flag(fields.pop(name))
            if flag is not None:
                fields[name] = flag
    return fields


@router.get("")
async def list_products(
    response: Response,
    category: str | None = None,
    featured: str | None = None,
    search: str | None = None,
    sort_by: str | None = Query(None, alias="sortBy"),
    page: int = Query(1, ge=1),
    limit: int = Query(100, ge=1, le=100),
) -> list[dict]:
    products, total = current_domain.repository_for(Product).search(
        category=category,
        featured=featured == "true",
        search=search,
        sort_by=sort_by,
        page=page,
        limit=limit,
    )
    response.headers["X-Total-Count"] = str(total)
    return [product_payload(p) for p in products]


@router.get("/{product_id}")
async def get_product(product_id: str) -> dict:
    return product_payload(get_or_404(Product, product_id, "Product"))


@router.post("", status_code=201, dependencies=[Depends(admin_user)])
async def create_product(
    fields: dict[str, str] = Depends(_form_fields),
    images: list[UploadFile] | None = File(None),
) -> dict:
    form = _parse_form(CreateProductForm, fields)

    image_urls = await save_images(images)
    command = CreateProduct(**_command_fields(form), image_urls=json.dumps(image_urls))
    try:
        product_id = current_domain.process(command, asynchronous=False)
    except Exception:
        for url in image_urls:
            delete_image(url)
        raise
    return product_payload(get_or_404(Product, product_id, "Product"))


@router.put("/{product_id}", dependencies=[Depends(admin_user)])
async def update_product(
    product_id: str,
    fields: dict[str, str] = Depends(_form_fields),
    images: list[UploadFile] | None = File(None),
) -> dict:
    get_or_404(Product, product_id, "Product")
    form = _parse_form(UpdateProductForm, fields)

    image_urls = await save_images(images)
    command = UpdateProductDetails(
        product_id=product_id,
        **_command_fields(form),
        image_urls=json.dumps(image_urls),
    )
    try:
        current_domain.process(command, asynchronous=False)
    except Exception:
        for url in image_urls:
            delete_image(url)
        raise
    return product_payload(get_or_404(Product, product_id, "Product"))


@router.delete("/{product_id}", response_model=MessageResponse, dependencies=[Depends(admin_user)])
async def delete_product(product_id: str) -> MessageResponse:
    get_or_404(Product, product_id, "Product")
    image_urls = current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    for url in image_urls or []:
        delete_image(url)
    return MessageResponse(message="Product removed")


@router.delete("/{product_id}/images/{image_id}", dependencies=[Depends(admin_user)])
async def delete_product_image(product_id: str, image_id: str) -> dict:
    get_or_404(Product, product_id, "Product")
    url = current_domain.process(RemoveProductImage(product_id=product_id, image_id=image_id), asynchronous=False)
    delete_image(url)
    return product_payload(get_or_404(Product, product_id, "Product"))
