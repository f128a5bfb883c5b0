"""Pydantic request/response schemas for the Zen Cafe API.

JSON keys are camelCase on the wire; snake_case names are accepted on input.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# --- Catalogue ---


class CategoryResponse(CamelModel):
    id: str
    name: str
    slug: str
    description: str | None = None
    image_url: str | None = None
    display_order: int = 0
    created_at: datetime | None = None


class CreateCategoryRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"name": "Ceylon Tea", "description": "Single-estate leaves", "displayOrder": 2}]}
    )

    name: str = Field(..., min_length=1, max_length=100)
    slug: str | None = Field(None, max_length=120)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    display_order: int = 0


class ProductResponse(CamelModel):
    id: str
    category_id: str
    name: str
    slug: str
    description: str
    price: str
    image_url: str
    origin: str | None = None
    brewing_suggestions: str | None = None
    in_stock: bool = True
    featured: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateProductRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "categoryId": "3f0a8c1e-0000-4000-8000-000000000001",
                    "name": "Ceylon Black Tea",
                    "description": "Bright, brisk high-grown tea.",
                    "price": "12.99",
                    "imageUrl": "https://cdn.zencafe.lk/ceylon-black.jpg",
                    "origin": "Nuwara Eliya",
                    "featured": True,
                }
            ]
        }
    )

    category_id: str
    name: str = Field(..., min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=220)
    description: str
    price: str
    image_url: str = Field(..., max_length=500)
    origin: str | None = Field(None, max_length=200)
    brewing_suggestions: str | None = None
    in_stock: bool = True
    featured: bool = False


class UpdateProductRequest(CamelModel):
    category_id: str | None = None
    name: str | None = Field(None, min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=220)
    description: str | None = None
    price: str | None = None
    image_url: str | None = Field(None, max_length=500)
    origin: str | None = Field(None, max_length=200)
    brewing_suggestions: str | None = None
    in_stock: bool | None = None
    featured: bool | None = None


# --- Orders ---


class OrderItemRequest(CamelModel):
    product_id: str
    quantity: int
    price: str


class PlaceOrderRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "items": [{"productId": "3f0a8c1e-0000-4000-8000-00000000000a", "quantity": 2, "price": "12.99"}],
                    "customerName": "Nimali Perera",
                    "customerEmail": "nimali@example.com",
                    "customerPhone": "+94 77 123 4567",
                    "deliveryAddress": "12 Temple Road, Kandy",
                    "totalAmount": "25.98",
                }
            ]
        }
    )

    items: list[OrderItemRequest]
    customer_name: str = Field(..., min_length=1, max_length=200)
    customer_email: str = Field(..., min_length=1, max_length=254)
    customer_phone: str | None = Field(None, max_length=50)
    delivery_address: str = Field(..., min_length=1)
    notes: str | None = None
    total_amount: str


class OrderResponse(CamelModel):
    id: str
    user_id: str
    status: str
    total_amount: str
    customer_name: str
    customer_email: str
    customer_phone: str | None = None
    delivery_address: str
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderItemResponse(CamelModel):
    id: str
    order_id: str
    product_id: str
    product_name: str
    quantity: int
    price: str
    created_at: datetime | None = None


class OrderStatusRequest(CamelModel):
    status: str


# --- Contact messages ---


class ContactMessageRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=1, max_length=254)
    phone: str | None = Field(None, max_length=50)
    message: str = Field(..., min_length=1)


class ContactMessageResponse(CamelModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    message: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MessageStatusRequest(CamelModel):
    status: str


# --- Notifications ---


class NotificationResponse(CamelModel):
    id: str
    user_id: str | None = None
    recipient_type: str
    type: str = Field(validation_alias="notification_type")
    title: str
    message: str
    is_read: bool
    entity_id: str | None = None
    created_at: datetime | None = None


class UnreadCountResponse(CamelModel):
    count: int


# --- Identity ---


class UserResponse(CamelModel):
    id: str
    external_id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    is_admin: bool = False
    created_at: datetime | None = None


class MeResponse(CamelModel):
    is_authenticated: bool
    is_admin: bool
    user: UserResponse | None = None


class TokenResponse(CamelModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int


class RefreshRequest(CamelModel):
    refresh_token: str


# --- Reporting ---


class DashboardStatsResponse(CamelModel):
    total_revenue: str
    total_orders: int
    total_products: int
    new_messages: int
    total_customers: int
