# order_api/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr
from typing import List, Optional
from datetime import datetime
from uuid import UUID

INT32_MAX = 2**31 - 1


class UserRegister(BaseModel):
    """Schema dla rejestracji użytkownika."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserLogin(BaseModel):
    """Logowanie - email bez walidacji formatu, nieznany email to po prostu 403."""

    email: str
    password: str


class TokenOut(BaseModel):
    token: str


class UserRead(BaseModel):
    """Schema dla użytkownika (response). Bez hasła."""

    user_id: UUID
    first_name: str
    last_name: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderItemIn(BaseModel):
    """Schema dla pozycji zamówienia."""

    description: str = Field(..., min_length=1)
    qty: int = Field(..., ge=0, le=INT32_MAX, description="Ilość (>= 0)")
    price: int = Field(..., ge=0, le=INT32_MAX, description="Cena jednostkowa w groszach (>= 0)")


class OrderCreate(BaseModel):
    """Schema dla tworzenia zamówienia."""

    note: Optional[str] = None
    items: List[OrderItemIn] = Field(..., min_length=1)


class OrderOut(BaseModel):
    """Schema dla utworzonego zamówienia (response)."""

    order_id: UUID
    user_id: UUID
    note: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderItemDetails(BaseModel):
    item_id: UUID
    description: str
    qty: int
    price: int


class OrderDetails(BaseModel):
    """Widok zamówienia z wyliczonym totalem. items tylko dla pojedynczego zamówienia."""

    order_id: UUID
    user_id: UUID
    note: Optional[str] = None
    order_total: int
    order_at: datetime
    items: Optional[List[OrderItemDetails]] = None
