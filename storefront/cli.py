"""
Terminal storefront.

    python -m storefront list
    python -m storefront add 3
    python -m storefront set 3 2
    python -m storefront remove 3
    python -m storefront cart
    python -m storefront checkout --name "Ivan" --address "Kyiv, Khreshchatyk 1"

The cart survives between invocations through local storage; the catalog is
fetched fresh on every run.
"""
import argparse
import asyncio
import sys
from typing import Optional

from storefront.cart import CartManager
from storefront.errors import (
    ERROR_CART_EMPTY,
    ERROR_INVALID_QUANTITY,
    ERROR_PRODUCT_NOT_FOUND,
    CheckoutError,
)
from storefront.services.money import format_money
from storefront.session import StorefrontSession


def _ask_yes_no(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N]: ").strip().lower()
    except EOFError:
        # No terminal to answer from: treat as declined
        return False
    return answer in ("y", "yes", "т", "так")


def _print_catalog(session: StorefrontSession) -> None:
    products = session.catalog.products
    if not products:
        print("No products available.")
        return
    for p in products:
        print(f"[{p.id}] {p.name} - {format_money(p.price)} (in stock: {p.stock})")
        if p.description:
            print(f"     {p.description}")


def _print_cart(cart: CartManager) -> None:
    print(f"Cart ({cart.count})")
    if cart.is_empty:
        print(ERROR_CART_EMPTY)
        return
    for item in cart.items:
        print(f"  [{item.product_id}] {item.product.name} x{item.quantity} - {format_money(item.total_price)}")
    print(f"Total: {format_money(cart.compute_total())}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront", description="Proto-Store terminal storefront")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Show the product catalog")
    sub.add_parser("cart", help="Show the cart")

    add = sub.add_parser("add", help="Add one unit of a product to the cart")
    add.add_argument("product_id", type=int)

    set_qty = sub.add_parser("set", help="Set the quantity of a cart line")
    set_qty.add_argument("product_id", type=int)
    set_qty.add_argument("quantity", type=int)

    remove = sub.add_parser("remove", help="Remove a product from the cart")
    remove.add_argument("product_id", type=int)

    checkout = sub.add_parser("checkout", help="Place the order (simulated payment)")
    checkout.add_argument("--name", required=True, help="Customer name")
    checkout.add_argument("--address", required=True, help="Delivery address")
    checkout.add_argument("--yes", action="store_true", help="Confirm the charge without asking")

    return parser


async def run(args: argparse.Namespace, session: StorefrontSession) -> int:
    await session.start()
    try:
        if args.command == "list":
            _print_catalog(session)
        elif args.command == "cart":
            _print_cart(session.cart)
        elif args.command == "add":
            product = session.catalog.get(args.product_id)
            if product is None:
                print(ERROR_PRODUCT_NOT_FOUND, file=sys.stderr)
                return 1
            session.cart.add_to_cart(product)
            _print_cart(session.cart)
        elif args.command == "set":
            if not session.cart.update_quantity(args.product_id, args.quantity):
                print(ERROR_INVALID_QUANTITY, file=sys.stderr)
                return 1
            _print_cart(session.cart)
        elif args.command == "remove":
            session.cart.remove_from_cart(args.product_id)
            _print_cart(session.cart)
        elif args.command == "checkout":
            checkout = session.checkout
            try:
                checkout.open_form()
                checkout.update_form(customer_name=args.name, delivery_address=args.address)
                confirm = (lambda _prompt: True) if args.yes else _ask_yes_no
                result = await checkout.pay(confirm)
            except CheckoutError as e:
                print(str(e), file=sys.stderr)
                return 1
            return 0 if result.success else 1
        return 0
    finally:
        await session.close()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    session = StorefrontSession(notify=print)
    return asyncio.run(run(args, session))
