"""
Company roster sources.

The dashboard tracks a fixed set of tickers. A remote source may refresh the
roster from a JSON endpoint; any failure there is reported as
``RosterUnavailableError`` so the service can degrade to the static table.
"""

from typing import Any, Awaitable, Callable, Optional

import httpx

from ..config.symbols import AI_COMPANIES, display_name
from ..data.models import CompanyInfo
from ..data.parsers import parse_json_payload
from ..errors import ParseError, RosterUnavailableError

RosterFetcher = Callable[[], Awaitable[list[CompanyInfo]]]


def static_roster(symbols: Optional[list[str]] = None) -> list[CompanyInfo]:
    """Roster built from the local symbol table; unknown tickers display as themselves."""
    return [CompanyInfo(symbol=symbol, display_name=display_name(symbol))
            for symbol in (symbols if symbols is not None else AI_COMPANIES)]


class RemoteRosterSource:
    """
    Fetches the roster from a JSON endpoint.

    Accepted bodies are a list of ticker strings or a list of
    ``{"symbol": ..., "name": ...}`` objects. Without a URL the source
    serves the static table.
    """

    def __init__(self, url: Optional[str] = None, http_client: Optional[httpx.AsyncClient] = None):
        self.url = url
        self.http_client = http_client

    async def __call__(self) -> list[CompanyInfo]:
        if self.url is None:
            return static_roster()

        try:
            if self.http_client is not None:
                response = await self.http_client.get(self.url)
            else:
                async with httpx.AsyncClient(follow_redirects=True) as client:
                    response = await client.get(self.url)
            response.raise_for_status()
            companies = self._parse(parse_json_payload(response.content))
        except (httpx.HTTPError, ParseError) as e:
            raise RosterUnavailableError(f"Roster fetch failed: {e}") from e

        if not companies:
            raise RosterUnavailableError("Roster endpoint returned no companies")
        return companies

    @staticmethod
    def _parse(payload: Any) -> list[CompanyInfo]:
        if not isinstance(payload, list):
            raise ParseError("Roster payload must be a list", raw_data=str(payload)[:100])

        companies = []
        seen = set()
        for item in payload:
            if isinstance(item, str):
                symbol, name = item.strip().upper(), None
            elif isinstance(item, dict) and isinstance(item.get("symbol"), str):
                symbol, name = item["symbol"].strip().upper(), item.get("name")
            else:
                raise ParseError("Roster entries must be tickers or {symbol, name} objects",
                                 raw_data=str(item)[:100])
            if not symbol or symbol in seen:
                continue
            seen.add(symbol)
            companies.append(CompanyInfo(symbol=symbol, display_name=name or display_name(symbol)))
        return companies
