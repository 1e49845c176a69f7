"""Tests for the terminal storefront"""
import httpx
import pytest

from storefront import cli
from storefront.cart import MemoryStorage
from storefront.services.shop_api import ShopAPIClient
from storefront.session import StorefrontSession


@pytest.fixture
def make_session(fake_shop):
    storage = MemoryStorage()

    def _make():
        api = ShopAPIClient(base_url="http://shop.test", transport=httpx.MockTransport(fake_shop.handler))
        return StorefrontSession(api=api, storage=storage, notify=print)

    return _make


async def _run(argv, session):
    return await cli.run(cli.build_parser().parse_args(argv), session)


@pytest.mark.asyncio
async def test_list(make_session, capsys):
    assert await _run(["list"], make_session()) == 0
    assert "[1] Coffee beans - 9.99 грн (in stock: 12)" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_cart_persists_between_runs(make_session, capsys):
    assert await _run(["add", "1"], make_session()) == 0
    assert await _run(["add", "1"], make_session()) == 0
    assert await _run(["set", "1", "3"], make_session()) == 0
    capsys.readouterr()

    await _run(["cart"], make_session())

    out = capsys.readouterr().out
    assert "Coffee beans x3" in out
    assert "Total: 29.97 грн" in out


@pytest.mark.asyncio
async def test_invalid_quantity(make_session):
    await _run(["add", "1"], make_session())
    assert await _run(["set", "1", "0"], make_session()) == 1


@pytest.mark.asyncio
async def test_add_unknown_product(make_session):
    assert await _run(["add", "99"], make_session()) == 1


@pytest.mark.asyncio
async def test_checkout_declined_at_prompt(make_session, fake_shop, monkeypatch, capsys):
    await _run(["add", "2"], make_session())
    monkeypatch.setattr("builtins.input", lambda prompt: "n")

    code = await _run(["checkout", "--name", "Ivan", "--address", "Kyiv"], make_session())

    assert code == 1
    assert fake_shop.orders == []
    assert "Оплата не пройшла" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_checkout_confirmed(make_session, fake_shop, capsys):
    await _run(["add", "2"], make_session())

    code = await _run(["checkout", "--name", "Ivan", "--address", "Kyiv", "--yes"], make_session())

    assert code == 0
    assert fake_shop.orders[0]["total"] == "4.00"
    assert "Замовлення успішно оформлено!" in capsys.readouterr().out

    await _run(["cart"], make_session())
    assert "Cart (0)" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_checkout_without_stdin_is_declined(make_session, fake_shop, monkeypatch, capsys):
    await _run(["add", "2"], make_session())

    def no_input(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)

    code = await _run(["checkout", "--name", "Ivan", "--address", "Kyiv"], make_session())

    assert code == 1
    assert fake_shop.orders == []
    assert "Оплата не пройшла" in capsys.readouterr().out

    await _run(["cart"], make_session())
    assert "Cart (1)" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_log_lines_stay_out_of_listing(make_session, capsys):
    await _run(["list"], make_session())

    assert "Loaded" not in capsys.readouterr().out
