"""
Catalog Router

Public shop browsing: categories, per-category products, product details
and paginated category listings.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.errors import CategoryNotFound, ProductNotFound
from storefront.services.domains import CatalogService
from .deps import get_catalog_service
from .serializers import serialize_category, serialize_page, serialize_product, serialize_tree

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/shop")
async def shop(catalog: CatalogService = Depends(get_catalog_service)):
    """All categories for the shop front."""
    categories = await catalog.shop()
    return {"categories": [serialize_category(c) for c in categories]}


@router.get("/products/{category_id}")
async def products_in_category(category_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    """Products of one category."""
    products = await catalog.products_in_category(category_id)
    return {"products": [serialize_product(p) for p in products]}


@router.get("/categories/{category_id}")
async def categories_below(category_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    """A category and its direct children."""
    try:
        tree = await catalog.categories_below(category_id)
    except CategoryNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return serialize_tree(tree)


@router.get("/categories-paged/{category_id}")
async def categories_below_paged(
    category_id: str,
    page: int = Query(1),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Paginated products of a category and its direct children."""
    try:
        tree, result = await catalog.categories_below_paged(category_id, page)
    except CategoryNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {
        "selected_category": serialize_category(tree.selected),
        "pagination": serialize_page(result),
    }


@router.get("/{product_id}")
async def product_detail(product_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    """Single product."""
    try:
        product = await catalog.get_product(product_id)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return serialize_product(product)
