"""Fetch fragments over HTTP.

Documentation sites serve fragments as static files next to the pages
that use them. ``fetch_fragment`` downloads one with httpx and parses
it; every failure surfaces as ``FragmentError``.
"""

from pathlib import PurePosixPath
from urllib.parse import unquote, urlsplit

import httpx

from implview.errors import FragmentError
from implview.index.trait_index import TraitIndex
from implview.loader.fragment import parse_fragment, trait_path_from_file


async def fetch_fragment(
    url: str,
    *,
    trait: str | None = None,
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> TraitIndex:
    """Download and parse the fragment at ``url``.

    When ``trait`` is omitted it is derived from the URL path
    (``.../implementors/core/ops/bit/trait.BitXor.js``). A caller-supplied
    ``client`` is used as-is and left open.
    """
    if trait is None:
        trait = trait_path_from_url(url)

    try:
        if client is None:
            async with httpx.AsyncClient() as owned:
                response = await owned.get(url, timeout=timeout)
        else:
            response = await client.get(url, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FragmentError(f"HTTP {exc.response.status_code} fetching fragment", url) from exc
    except httpx.HTTPError as exc:
        raise FragmentError(f"could not fetch fragment: {exc}", url) from exc

    return parse_fragment(response.content, trait=trait, label=url)


def trait_path_from_url(url: str) -> str | None:
    """Trait path encoded in a fragment URL, or ``None`` for other names."""
    path = PurePosixPath(unquote(urlsplit(url).path))
    try:
        return trait_path_from_file(path)
    except FragmentError:
        return None
