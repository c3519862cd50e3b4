"""Pydantic request schemas for the store API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """Request body accepting snake_case names and their camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Users ---


class RegisterRequest(RequestModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"username": "jane_doe", "email": "jane@example.com", "password": "s3cret-pass"}]
        }
    }

    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


class LoginRequest(RequestModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "jane@example.com", "password": "s3cret-pass"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class UpdateProfileRequest(RequestModel):
    model_config = {
        "json_schema_extra": {"examples": [{"first_name": "Jane", "last_name": "Doe", "phone": "+15550123"}]}
    }

    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=20)


class ChangePasswordRequest(RequestModel):
    current_password: str = Field(..., max_length=128)
    new_password: str = Field(..., min_length=1, max_length=128)


class AddressRequest(RequestModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "first_name": "Jane",
                    "last_name": "Doe",
                    "address": "123 Main St",
                    "apartment": "Apt 4B",
                    "city": "New York",
                    "state": "NY",
                    "postal_code": "10001",
                    "country": "US",
                    "phone": "+15550123",
                    "is_default": True,
                }
            ]
        }
    }

    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    address: str = Field(..., max_length=255)
    apartment: str | None = Field(None, max_length=100)
    city: str = Field(..., max_length=100)
    state: str = Field(..., max_length=100)
    postal_code: str = Field(..., max_length=20)
    country: str = Field(..., max_length=100)
    phone: str = Field(..., max_length=20)
    is_default: bool = False


# --- Products ---


class ProductFormRequest(RequestModel):
    """Multipart product fields. Lists arrive comma separated and flags as `"true"`/`"false"`."""

    name: str | None = None
    description: str | None = None
    price: float | None = None
    category: str | None = None
    sizes: str | None = None
    colors: str | None = None
    tags: str | None = None
    compare_at_price: float | None = None
    stock_quantity: int | None = None
    low_stock_threshold: int | None = None
    featured: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None


class CreateProductForm(ProductFormRequest):
    name: str
    description: str
    price: float
    category: str


class UpdateProductForm(ProductFormRequest):
    in_stock: str | None = None


# --- Orders ---


class OrderItemRequest(RequestModel):
    product_id: str = Field(..., validation_alias=AliasChoices("product_id", "productId", "product"))
    quantity: int = Field(..., ge=1)
    size: str = Field(..., max_length=5)
    color: str = Field(..., max_length=50)
    # Accepted for compatibility; the catalogue price is what gets charged
    price: float | None = None


class ShippingAddressRequest(RequestModel):
    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    address: str = Field(..., max_length=255)
    apartment: str | None = Field(None, max_length=100)
    city: str = Field(..., max_length=100)
    state: str = Field(..., max_length=100)
    postal_code: str = Field(..., max_length=20)
    country: str = Field(..., max_length=100)
    phone: str = Field(..., max_length=20)


class PlaceOrderRequest(RequestModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": None,
                    "items": [{"product_id": "prod-001", "quantity": 2, "size": "M", "color": "Black"}],
                    "total_amount": 39.98,
                    "shipping_address": {
                        "first_name": "Jane",
                        "last_name": "Doe",
                        "address": "123 Main St",
                        "city": "New York",
                        "state": "NY",
                        "postal_code": "10001",
                        "country": "US",
                        "phone": "+15550123",
                    },
                    "payment_method": "credit_card",
                }
            ]
        }
    }

    user_id: str | None = None
    items: list[OrderItemRequest] = Field(..., min_length=1)
    total_amount: float = Field(..., ge=0)
    shipping_address: ShippingAddressRequest
    billing_address: ShippingAddressRequest | None = None
    payment_method: str = Field(..., max_length=20)
    customer_notes: str | None = None


class UpdateOrderRequest(RequestModel):
    order_status: str | None = Field(None, max_length=20)
    payment_status: str | None = Field(None, max_length=20)
    tracking_number: str | None = Field(None, max_length=100)
    admin_notes: str | None = None


# --- Reviews ---


class SubmitReviewRequest(RequestModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"rating": 5, "title": "Perfect fit!", "body": "Soft fabric and it keeps its shape."}]
        }
    }

    rating: int = Field(..., ge=1, le=5)
    title: str | None = Field(None, max_length=200)
    body: str = Field(..., min_length=1, validation_alias=AliasChoices("body", "review"))


class ModerateReviewRequest(RequestModel):
    action: str = Field(..., max_length=10)


class HelpfulVoteRequest(RequestModel):
    helpful: bool


# --- Categories ---


class CreateCategoryRequest(RequestModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Graphic Tees", "description": "Printed designs"}]}}

    name: str = Field(..., max_length=100)
    description: str | None = None
    parent_category_id: str | None = None
    image: str | None = Field(None, max_length=500)
    featured: bool = False
    meta_title: str | None = Field(None, max_length=70)
    meta_description: str | None = Field(None, max_length=160)


class UpdateCategoryRequest(RequestModel):
    name: str | None = Field(None, max_length=100)
    description: str | None = None
    image: str | None = Field(None, max_length=500)
    featured: bool | None = None
    meta_title: str | None = Field(None, max_length=70)
    meta_description: str | None = Field(None, max_length=160)


class ReorderCategoryRequest(RequestModel):
    new_display_order: int = Field(..., ge=0)


# --- Coupons ---


class CouponRequest(RequestModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "code": "SUMMER25",
                    "description": "25% off summer collection",
                    "discount_type": "percentage",
                    "value": 25,
                    "min_purchase": 50.0,
                    "usage_limit": 1000,
                }
            ]
        }
    }

    code: str = Field(..., max_length=50)
    description: str | None = Field(None, max_length=255)
    discount_type: str = Field(..., max_length=20)
    value: float = 0.0
    min_purchase: float | None = None
    max_discount: float | None = None
    usage_limit: int | None = None
    per_user_limit: int | None = None
    products: list[str] | None = None
    categories: list[str] | None = None
    excluded_products: list[str] | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class UpdateCouponRequest(RequestModel):
    code: str | None = Field(None, max_length=50)
    description: str | None = Field(None, max_length=255)
    discount_type: str | None = Field(None, max_length=20)
    value: float | None = None
    min_purchase: float | None = None
    max_discount: float | None = None
    usage_limit: int | None = None
    per_user_limit: int | None = None
    products: list[str] | None = None
    categories: list[str] | None = None
    excluded_products: list[str] | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    active: bool | None = None


# --- Site configuration ---


class SiteConfigRequest(RequestModel):
    store_name: str | None = Field(None, max_length=100)
    contact: dict[str, Any] | None = None
    social: dict[str, Any] | None = None
    shipping: dict[str, Any] | None = None
    tax: dict[str, Any] | None = None
    analytics: dict[str, Any] | None = None


# --- Responses ---


class MessageResponse(BaseModel):
    message: str


class IdResponse(BaseModel):
    id: str
