"""Tests for CartManager operations and invariants"""
import pytest
from unittest.mock import AsyncMock

from storefront.cart import CartManager, ProductSnapshot
from storefront.errors import InvalidPrice, InvalidQuantity, ProductNotFound, StoreUnavailable


def _state(cart):
    return [(line.product_id, line.quantity, line.unit_price_minor_units) for line in cart.lines]


@pytest.mark.asyncio
async def test_add_to_empty_cart(cart_manager, context_id):
    """Empty cart + add SKU1 x2 at 500 -> one line, total 1000"""
    await cart_manager.add(context_id, "SKU1", 2)

    lines = await cart_manager.lines(context_id)
    assert [(l.product_id, l.quantity, l.unit_price_minor_units) for l in lines] == [("SKU1", 2, 500)]
    assert await cart_manager.total(context_id) == 1000


@pytest.mark.asyncio
async def test_add_existing_product_merges(cart_manager, context_id):
    """SKU1 x2 then add SKU1 x3 -> SKU1 x5, not two lines"""
    await cart_manager.add(context_id, "SKU1", 2)
    cart = await cart_manager.add(context_id, "SKU1", 3)

    assert _state(cart) == [("SKU1", 5, 500)]


@pytest.mark.asyncio
@pytest.mark.parametrize("quantities", [[1], [1, 1, 1], [2, 7], [5, 1, 3, 10], [100, 1]])
async def test_repeated_add_sums_quantities(cart_manager, context_id, quantities):
    for quantity in quantities:
        await cart_manager.add(context_id, "SKU2", quantity)

    lines = await cart_manager.lines(context_id)
    assert len(lines) == 1
    assert lines[0].quantity == sum(quantities)


@pytest.mark.asyncio
async def test_add_order_does_not_matter(product_lookup):
    from storefront.cart import InMemoryCartStore

    forward = CartManager(product_lookup, InMemoryCartStore())
    backward = CartManager(product_lookup, InMemoryCartStore())
    for quantity in (1, 4, 2):
        await forward.add("ctx", "SKU1", quantity)
    for quantity in (2, 4, 1):
        await backward.add("ctx", "SKU1", quantity)

    assert _state(await forward.get_cart("ctx")) == _state(await backward.get_cart("ctx"))


@pytest.mark.asyncio
async def test_add_default_quantity_is_one(cart_manager, context_id):
    cart = await cart_manager.add(context_id, "SKU1")

    assert _state(cart) == [("SKU1", 1, 500)]


@pytest.mark.asyncio
async def test_add_missing_product(cart_manager, context_id):
    """add MISSING -> ProductNotFound, cart unchanged"""
    await cart_manager.add(context_id, "SKU1", 2)
    before = _state(await cart_manager.get_cart(context_id))

    with pytest.raises(ProductNotFound) as exc_info:
        await cart_manager.add(context_id, "MISSING", 1)

    assert exc_info.value.product_id == "MISSING"
    assert _state(await cart_manager.get_cart(context_id)) == before


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [0, -3, 2.5, "2", None, True])
async def test_add_invalid_quantity(cart_manager, product_lookup, context_id, quantity):
    await cart_manager.add(context_id, "SKU1", 1)

    with pytest.raises(InvalidQuantity):
        await cart_manager.add(context_id, "SKU1", quantity)

    assert _state(await cart_manager.get_cart(context_id)) == [("SKU1", 1, 500)]
    # Rejected before the lookup is consulted
    assert product_lookup.calls == 1


@pytest.mark.asyncio
async def test_add_snapshot_survives_catalog_change(cart_manager, product_lookup, snapshots, context_id):
    await cart_manager.add(context_id, "SKU1", 1)
    del product_lookup.products["SKU1"]

    lines = await cart_manager.lines(context_id)
    assert lines[0].display_name == "Trail Runner"
    assert await cart_manager.total(context_id) == 500


@pytest.mark.asyncio
async def test_remove(cart_manager, context_id):
    """{SKU1 x2, SKU2 x1} remove SKU1 -> {SKU2 x1}; again -> unchanged"""
    await cart_manager.add(context_id, "SKU1", 2)
    await cart_manager.add(context_id, "SKU2", 1)

    once = _state(await cart_manager.remove(context_id, "SKU1"))
    twice = _state(await cart_manager.remove(context_id, "SKU1"))

    assert once == [("SKU2", 1, 1299)]
    assert twice == once


@pytest.mark.asyncio
async def test_remove_from_empty_cart(cart_manager, context_id):
    cart = await cart_manager.remove(context_id, "SKU1")

    assert cart.is_empty


@pytest.mark.asyncio
async def test_remove_absent_product_does_not_save(cart_manager, cart_store, context_id):
    await cart_manager.add(context_id, "SKU1", 1)
    cart_store.fail_save = True

    cart = await cart_manager.remove(context_id, "SKU2")

    assert _state(cart) == [("SKU1", 1, 500)]


@pytest.mark.asyncio
async def test_update_quantity_zero_equals_remove(product_lookup):
    from storefront.cart import InMemoryCartStore

    via_update = CartManager(product_lookup, InMemoryCartStore())
    via_remove = CartManager(product_lookup, InMemoryCartStore())
    for manager in (via_update, via_remove):
        await manager.add("ctx", "SKU1", 2)
        await manager.add("ctx", "SKU2", 1)

    await via_update.update_quantity("ctx", "SKU1", 0)
    await via_remove.remove("ctx", "SKU1")

    assert _state(await via_update.get_cart("ctx")) == _state(await via_remove.get_cart("ctx"))


@pytest.mark.asyncio
async def test_update_quantity_replaces(cart_manager, context_id):
    await cart_manager.add(context_id, "SKU1", 2)

    cart = await cart_manager.update_quantity(context_id, "SKU1", 9)

    assert _state(cart) == [("SKU1", 9, 500)]


@pytest.mark.asyncio
async def test_update_quantity_negative(cart_manager, context_id):
    await cart_manager.add(context_id, "SKU1", 2)

    with pytest.raises(InvalidQuantity):
        await cart_manager.update_quantity(context_id, "SKU1", -1)

    assert _state(await cart_manager.get_cart(context_id)) == [("SKU1", 2, 500)]


@pytest.mark.asyncio
async def test_update_quantity_missing_product_is_noop(cart_manager, context_id):
    cart = await cart_manager.update_quantity(context_id, "SKU2", 3)

    assert cart.is_empty


@pytest.mark.asyncio
async def test_empty(cart_manager, context_id):
    await cart_manager.add(context_id, "SKU1", 2)
    await cart_manager.add(context_id, "SKU2", 1)

    await cart_manager.empty(context_id)

    assert await cart_manager.lines(context_id) == []
    assert await cart_manager.total(context_id) == 0


@pytest.mark.asyncio
async def test_empty_on_empty_cart(cart_manager, context_id):
    await cart_manager.empty(context_id)

    assert await cart_manager.lines(context_id) == []


@pytest.mark.asyncio
async def test_total_is_exact_and_non_negative(cart_manager, context_id):
    await cart_manager.add(context_id, "SKU1", 3)
    await cart_manager.add(context_id, "SKU2", 2)
    await cart_manager.add(context_id, "SKU3", 4)

    lines = await cart_manager.lines(context_id)
    total = await cart_manager.total(context_id)

    assert total == sum(l.unit_price_minor_units * l.quantity for l in lines)
    assert total == 3 * 500 + 2 * 1299
    assert total >= 0


@pytest.mark.asyncio
async def test_carts_are_isolated_per_context(cart_manager):
    await cart_manager.add("ctx-a", "SKU1", 1)
    await cart_manager.add("ctx-b", "SKU2", 1)

    assert [l.product_id for l in await cart_manager.lines("ctx-a")] == ["SKU1"]
    assert [l.product_id for l in await cart_manager.lines("ctx-b")] == ["SKU2"]


@pytest.mark.asyncio
async def test_save_failure_is_not_applied(cart_manager, cart_store, context_id):
    await cart_manager.add(context_id, "SKU1", 1)
    cart_store.fail_save = True

    with pytest.raises(StoreUnavailable):
        await cart_manager.add(context_id, "SKU1", 5)

    cart_store.fail_save = False
    assert _state(await cart_manager.get_cart(context_id)) == [("SKU1", 1, 500)]


@pytest.mark.asyncio
async def test_load_failure_surfaces(cart_manager, cart_store, context_id):
    cart_store.fail_load = True

    with pytest.raises(StoreUnavailable):
        await cart_manager.summary(context_id)


@pytest.mark.asyncio
async def test_lookup_errors_propagate(cart_store, context_id):
    lookup = AsyncMock()
    lookup.resolve.side_effect = RuntimeError("catalog down")
    manager = CartManager(lookup, cart_store)

    with pytest.raises(RuntimeError):
        await manager.add(context_id, "SKU1", 1)

    assert len(cart_store) == 0


@pytest.mark.asyncio
async def test_lines_are_copies(cart_manager, context_id):
    await cart_manager.add(context_id, "SKU1", 1)

    lines = await cart_manager.lines(context_id)
    lines[0].quantity = 99

    assert (await cart_manager.lines(context_id))[0].quantity == 1


@pytest.mark.asyncio
async def test_summary(cart_manager, context_id):
    await cart_manager.add(context_id, "SKU1", 2)

    summary = await cart_manager.summary(context_id)

    assert summary["context_id"] == context_id
    assert summary["total_minor_units"] == 1000
    assert summary["total"] == "10.00"
    assert summary["lines"][0]["quantity"] == 2


@pytest.mark.asyncio
async def test_add_negative_priced_product_rejected(cart_manager, product_lookup, context_id):
    await cart_manager.add(context_id, "SKU1", 1)
    product_lookup.products["BAD"] = ProductSnapshot(product_id="BAD", display_name="Broken", unit_price_minor_units=-100)

    with pytest.raises(InvalidPrice):
        await cart_manager.add(context_id, "BAD", 1)

    assert _state(await cart_manager.get_cart(context_id)) == [("SKU1", 1, 500)]
