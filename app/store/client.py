import logging
from typing import Any, Iterable, Optional, Sequence
from urllib.parse import quote

import httpx

from app.core.config import Settings
from app.core.errors import UpstreamError

logger = logging.getLogger("store")

# Airtable rejects write calls with more than 10 records
PATCH_BATCH_SIZE = 10


def formula_equals(field: str, value: Any) -> str:
    """Build an Airtable ``filterByFormula`` expression comparing a field to a literal."""
    if isinstance(value, bool):
        literal = "TRUE()" if value else "FALSE()"
    elif isinstance(value, (int, float)):
        literal = str(value)
    else:
        escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
        literal = f'"{escaped}"'
    return f"{{{field}}} = {literal}"


def build_list_params(
    sort: Optional[Sequence[tuple[str, str]]] = None,
    filter_formula: Optional[str] = None,
    fields: Optional[Iterable[str]] = None,
    max_records: Optional[int] = None,
    offset: Optional[str] = None,
) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    for idx, (field, direction) in enumerate(sort or []):
        params.append((f"sort[{idx}][field]", field))
        params.append((f"sort[{idx}][direction]", direction))
    if filter_formula:
        params.append(("filterByFormula", filter_formula))
    for field in fields or []:
        params.append(("fields[]", field))
    if max_records is not None:
        params.append(("maxRecords", str(max_records)))
    if offset:
        params.append(("offset", offset))
    return params


class RecordStoreClient:
    """Thin async client for the Airtable REST API of one base."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.store_base_url,
            headers={
                "Authorization": f"Bearer {settings.airtable_api_key}",
                "Content-Type": "application/json",
            },
            timeout=settings.store_timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[list[tuple[str, str]]] = None,
        json: Optional[dict] = None,
    ) -> dict:
        resp = await self._client.request(method, path, params=params, json=json)
        data = resp.json()
        if isinstance(data, dict) and data.get("error"):
            logger.error(
                "Store call failed: %s %s status=%s error=%r",
                method,
                path,
                resp.status_code,
                data["error"],
            )
            raise UpstreamError(data["error"], status=resp.status_code)
        logger.debug("Store call: %s %s status=%s", method, path, resp.status_code)
        return data

    async def list_records(
        self,
        table: str,
        sort: Optional[Sequence[tuple[str, str]]] = None,
        filter_formula: Optional[str] = None,
        fields: Optional[Iterable[str]] = None,
        max_records: Optional[int] = None,
    ) -> list[dict]:
        fields = list(fields) if fields else None
        records: list[dict] = []
        offset = None
        while True:
            params = build_list_params(sort, filter_formula, fields, max_records, offset)
            data = await self.request("GET", quote(table), params=params)
            records.extend(data.get("records", []))
            offset = data.get("offset")
            if not offset or (max_records is not None and len(records) >= max_records):
                break
        return records

    async def create_record(self, table: str, fields: dict) -> dict:
        data = await self.request("POST", quote(table), json={"records": [{"fields": fields}]})
        return data["records"][0]

    async def update_record(self, table: str, record_id: str, fields: dict) -> dict:
        records = await self.update_records(table, [(record_id, fields)])
        return records[0]

    async def update_records(self, table: str, updates: Sequence[tuple[str, dict]]) -> list[dict]:
        """PATCH several records, at most ``PATCH_BATCH_SIZE`` per call, in the given order."""
        records: list[dict] = []
        for start in range(0, len(updates), PATCH_BATCH_SIZE):
            batch = updates[start : start + PATCH_BATCH_SIZE]
            data = await self.request(
                "PATCH",
                quote(table),
                json={"records": [{"id": record_id, "fields": fields} for record_id, fields in batch]},
            )
            records.extend(data["records"])
        return records
