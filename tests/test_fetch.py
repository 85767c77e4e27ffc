"""Tests for implview.loader.fetch — HTTP loading through httpx.MockTransport."""

from collections.abc import Callable

import httpx
import pytest
from samples import BITXOR_FRAGMENT

from implview.errors import FragmentError
from implview.loader.fetch import fetch_fragment, trait_path_from_url
from implview.loader.fragment import parse_fragment

URL = "https://docs.example/compiler/implementors/core/ops/bit/trait.BitXor.js"


def _client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestFetchFragment:
    async def test_fetch_and_parse(self, bitxor_js: str) -> None:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.path)
            return httpx.Response(200, text=bitxor_js)

        async with _client(handler) as client:
            index = await fetch_fragment(URL, client=client)

        assert requested == ["/compiler/implementors/core/ops/bit/trait.BitXor.js"]
        assert index == parse_fragment(BITXOR_FRAGMENT, trait="core::ops::bit::BitXor")

    async def test_explicit_trait(self, bitxor_js: str) -> None:
        async with _client(lambda request: httpx.Response(200, text=bitxor_js)) as client:
            index = await fetch_fragment("https://docs.example/data.js", trait="x::Y", client=client)
        assert index.trait == "x::Y"

    async def test_http_error_status(self) -> None:
        async with _client(lambda request: httpx.Response(404, text="missing")) as client:
            with pytest.raises(FragmentError, match="HTTP 404") as exc_info:
                await fetch_fragment(URL, client=client)
        assert exc_info.value.source == URL
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    async def test_any_success_status(self, bitxor_js: str) -> None:
        async with _client(lambda request: httpx.Response(203, text=bitxor_js)) as client:
            index = await fetch_fragment(URL, client=client)
        assert index.trait == "core::ops::bit::BitXor"

    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(FragmentError, match="could not fetch") as exc_info:
                await fetch_fragment(URL, client=client)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_malformed_body(self) -> None:
        async with _client(lambda request: httpx.Response(200, text="<html>oops</html>")) as client:
            with pytest.raises(FragmentError):
                await fetch_fragment(URL, client=client)

    async def test_client_left_open(self, bitxor_js: str) -> None:
        client = _client(lambda request: httpx.Response(200, text=bitxor_js))
        await fetch_fragment(URL, client=client)
        assert not client.is_closed
        await client.aclose()


class TestTraitPathFromUrl:
    def test_fragment_url(self) -> None:
        assert trait_path_from_url(URL) == "core::ops::bit::BitXor"

    def test_percent_encoded(self) -> None:
        url = "https://docs.example/implementors/my%5Fcrate/trait.Foo.js?v=1"
        assert trait_path_from_url(url) == "my_crate::Foo"

    def test_other_url(self) -> None:
        assert trait_path_from_url("https://docs.example/search-index.js") is None
