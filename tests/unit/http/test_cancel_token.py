"""
Unit tests for CancelToken.
"""

import asyncio

import pytest

from http_retry.http.cancel import CANCEL_TOKEN_KEY, CancelToken


def test_attach_and_lookup(make_request):
    token = CancelToken()
    request = token.attach(make_request())

    assert request.extensions[CANCEL_TOKEN_KEY] is token
    assert CancelToken.of(request) is token


def test_lookup_without_token(make_request):
    assert CancelToken.of(make_request()) is None


def test_cancel_is_one_shot():
    token = CancelToken()

    token.cancel("first")
    token.cancel("second")

    assert token.is_cancelled
    assert token.reason == "first"


@pytest.mark.asyncio
async def test_wait_for_times_out_when_not_cancelled():
    assert await CancelToken().wait_for(0.01) is False


@pytest.mark.asyncio
async def test_wait_for_returns_early_on_cancel():
    token = CancelToken()
    asyncio.get_running_loop().call_later(0.01, token.cancel)

    assert await asyncio.wait_for(token.wait_for(30), timeout=5) is True


@pytest.mark.asyncio
async def test_wait_for_already_cancelled():
    token = CancelToken()
    token.cancel()

    assert await token.wait_for(30) is True
