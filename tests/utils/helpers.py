from typing import Any, Awaitable, Callable, TypeVar

from httpx import AsyncClient

from groupledger.services.ledger_engine import LedgerEngine

T = TypeVar("T")


async def run_in_transaction(
    ledger: LedgerEngine,
    operation: Callable[..., Awaitable[T]],
    *args: Any,
) -> T:
    """Apply one ledger call all-or-nothing, the way the HTTP layer does."""
    async with ledger.transaction():
        return await operation(*args)


async def create_group_with_members(
    ledger: LedgerEngine,
    addresses: list[str],
    name: str = "group",
) -> int:
    group_id = await run_in_transaction(ledger, ledger.create_group, name)
    for address in addresses:
        await run_in_transaction(ledger, ledger.add_member, group_id, address)
    return group_id


async def balance_sum(ledger: LedgerEngine, group_id: int) -> int:
    return sum(balance for _, balance in await ledger.get_balances(group_id))


async def create_group_via_api(
    client: AsyncClient,
    addresses: list[str],
    name: str = "group",
) -> int:
    response = await client.post("/v1/groups", json={"name": name})
    group_id = response.json()["id"]
    for address in addresses:
        await client.post(f"/v1/groups/{group_id}/members", json={"address": address})
    return group_id


async def get_balances_via_api(client: AsyncClient, group_id: int) -> dict[str, int]:
    response = await client.get(f"/v1/groups/{group_id}")
    return {m["address"]: m["balance"] for m in response.json()["members"]}
