"""
Admin Products Router

Product management endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.auth import verify_admin
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.routers.deps import get_db
from storefront.routers.serializers import serialize_product
from storefront.services.database import Database
from .models import ProductRequest

logger = get_logger(__name__)

router = APIRouter(tags=["admin-products"])


@router.get("/products")
async def admin_get_products(admin=Depends(verify_admin), db: Database = Depends(get_db)):
    """List all products"""
    products = await db.products.get_all()
    return {"products": [serialize_product(p) for p in products]}


@router.post("/products", status_code=201)
async def admin_create_product(
    request: ProductRequest, admin=Depends(verify_admin), db: Database = Depends(get_db)
):
    """Create a new product"""
    product = await db.products.create(request.model_dump(mode="json"))
    logger.info(f"Product created: {sanitize_id_for_logging(product.id)}")
    return {"success": True, "product": serialize_product(product)}


@router.get("/products/{product_id}")
async def admin_get_product(product_id: str, admin=Depends(verify_admin), db: Database = Depends(get_db)):
    """Show one product"""
    product = await db.products.get_by_id(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return serialize_product(product)


@router.put("/products/{product_id}")
async def admin_update_product(
    product_id: str, request: ProductRequest, admin=Depends(verify_admin), db: Database = Depends(get_db)
):
    """Update a product"""
    product = await db.products.update(product_id, request.model_dump(mode="json"))
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    logger.info(f"Product updated: {sanitize_id_for_logging(product_id)}")
    return {"success": True, "product": serialize_product(product)}


@router.delete("/products/{product_id}")
async def admin_delete_product(product_id: str, admin=Depends(verify_admin), db: Database = Depends(get_db)):
    """Delete a product. Existing cart lines keep their snapshot."""
    deleted = await db.products.delete(product_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    logger.info(f"Product deleted: {sanitize_id_for_logging(product_id)}")
    return {"success": True, "deleted": True}
