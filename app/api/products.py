from fastapi import APIRouter, Depends, Query

from app.api.auth import require_admin, require_viewer
from app.config import settings
from app.limits import api_limit
from app.models.user import User
from app.schemas.common import ApiResponse, PaginatedResponse, paginate
from app.schemas.product import ProductCreate, ProductOut, ProductUpdate
from app.services import product_service
from app.store import InventoryStore, get_store

router = APIRouter(prefix="/products", tags=["Products"], dependencies=[Depends(api_limit)])


@router.get("", response_model=PaginatedResponse[ProductOut])
def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    category: str | None = None,
    user: User = Depends(require_viewer),
    store: InventoryStore = Depends(get_store),
):
    products = product_service.list_products(store, category=category)
    items, pagination = paginate(products, page, limit)
    return PaginatedResponse[ProductOut](
        message="Products retrieved successfully",
        data=items,
        pagination=pagination,
    )


@router.get("/low-stock", response_model=ApiResponse[list[ProductOut]])
def low_stock(user: User = Depends(require_viewer), store: InventoryStore = Depends(get_store)):
    return ApiResponse[list[ProductOut]](
        message="Low stock products retrieved successfully",
        data=product_service.get_low_stock(store),
    )


@router.get("/{product_id}", response_model=ApiResponse[ProductOut])
def get_product(product_id: str, user: User = Depends(require_viewer), store: InventoryStore = Depends(get_store)):
    return ApiResponse[ProductOut](
        message="Product retrieved successfully",
        data=product_service.get_product(store, product_id),
    )


@router.post("", response_model=ApiResponse[ProductOut], status_code=201)
def create_product(data: ProductCreate, user: User = Depends(require_admin), store: InventoryStore = Depends(get_store)):
    product = product_service.create_product(store, data, user_id=user.id)
    return ApiResponse[ProductOut](message="Product created successfully", data=product)


@router.put("/{product_id}", response_model=ApiResponse[ProductOut])
def update_product(
    product_id: str,
    data: ProductUpdate,
    user: User = Depends(require_admin),
    store: InventoryStore = Depends(get_store),
):
    product = product_service.update_product(store, product_id, data, user_id=user.id)
    return ApiResponse[ProductOut](message="Product updated successfully", data=product)


@router.delete("/{product_id}", response_model=ApiResponse[None])
def delete_product(product_id: str, user: User = Depends(require_admin), store: InventoryStore = Depends(get_store)):
    product_service.delete_product(store, product_id, user_id=user.id)
    return ApiResponse[None](message="Product deleted successfully")
