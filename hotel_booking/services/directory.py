from __future__ import annotations

import logging
from typing import Any

import httpx

from hotel_booking.exceptions.custom import DirectoryError, RateLimitError

logger = logging.getLogger(__name__)

REST_PATH = "/rest/v1"

# Filter values: plain value → eq, (op, value) tuple → op, list → in
FilterValue = Any
Order = list[tuple[str, bool]]  # (column, ascending)


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def encode_filter(value: FilterValue) -> str:
    if isinstance(value, tuple):
        op, operand = value
        if op == "in":
            return encode_filter(list(operand))
        return f"{op}.{_encode_value(operand)}"
    if isinstance(value, (list, set, frozenset)):
        return "in.(" + ",".join(_encode_value(v) for v in value) + ")"
    if value is None:
        return "is.null"
    return f"eq.{_encode_value(value)}"


def build_query_params(
    filters: dict[str, FilterValue] | None = None,
    order: Order | None = None,
    limit: int | None = None,
    select: str = "*",
) -> dict[str, str]:
    params = {"select": select}
    for column, value in (filters or {}).items():
        params[column] = encode_filter(value)
    if order:
        params["order"] = ",".join(
            f"{column}.{'asc' if ascending else 'desc'}" for column, ascending in order
        )
    if limit is not None:
        params["limit"] = str(limit)
    return params


def extract_error_message(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text
    if isinstance(data, dict):
        for key in ("message", "msg", "error_description", "error"):
            if data.get(key):
                return str(data[key])
    return resp.text


class DirectoryService:
    """Row API of the managed backend: per-entity list/get/create/update/delete.

    Every call may carry the caller's access token so the backend applies
    its row-level policies as that user; without one the anon key is used.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str, api_key: str):
        self._client = client
        self._base_url = base_url.rstrip("/") + REST_PATH
        self._api_key = api_key

    def _headers(self, access_token: str | None = None) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {access_token or self._api_key}",
            "Content-Type": "application/json",
        }

    def _url(self, entity: str) -> str:
        return f"{self._base_url}/{entity}"

    def _check(self, resp: httpx.Response) -> None:
        if resp.status_code == 429:
            raise RateLimitError("Directory")
        if resp.status_code >= 400:
            raise DirectoryError(extract_error_message(resp), status_code=resp.status_code)

    async def list(
        self,
        entity: str,
        filters: dict[str, FilterValue] | None = None,
        order: Order | None = None,
        limit: int | None = None,
        select: str = "*",
        access_token: str | None = None,
    ) -> list[dict]:
        resp = await self._client.get(
            self._url(entity),
            params=build_query_params(filters, order, limit, select),
            headers=self._headers(access_token),
        )
        self._check(resp)
        records = resp.json()
        logger.debug("Listed %d %s", len(records), entity)
        return records

    async def get(
        self,
        entity: str,
        record_id: str,
        select: str = "*",
        access_token: str | None = None,
    ) -> dict | None:
        records = await self.list(
            entity,
            filters={"id": record_id},
            limit=1,
            select=select,
            access_token=access_token,
        )
        return records[0] if records else None

    async def create(
        self,
        entity: str,
        fields: dict[str, Any],
        access_token: str | None = None,
    ) -> dict:
        headers = self._headers(access_token)
        headers["Prefer"] = "return=representation"
        resp = await self._client.post(self._url(entity), json=fields, headers=headers)
        self._check(resp)

        records = resp.json()
        if not records:
            raise DirectoryError(f"Backend returned no {entity} record after insert")
        logger.info("Created %s %s", entity, records[0].get("id"))
        return records[0]

    async def update(
        self,
        entity: str,
        record_id: str,
        fields: dict[str, Any],
        access_token: str | None = None,
    ) -> dict | None:
        """Patch one row. Returns None when no visible row matched."""
        headers = self._headers(access_token)
        headers["Prefer"] = "return=representation"
        resp = await self._client.patch(
            self._url(entity),
            params={"id": encode_filter(record_id)},
            json=fields,
            headers=headers,
        )
        self._check(resp)

        records = resp.json()
        if not records:
            return None
        logger.info("Updated %s %s", entity, record_id)
        return records[0]

    async def delete(
        self,
        entity: str,
        record_id: str,
        access_token: str | None = None,
    ) -> None:
        resp = await self._client.delete(
            self._url(entity),
            params={"id": encode_filter(record_id)},
            headers=self._headers(access_token),
        )
        self._check(resp)
        logger.info("Deleted %s %s", entity, record_id)
