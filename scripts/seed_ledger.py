import argparse
import asyncio

import httpx

MEMBERS = ["addr_ana", "addr_ben", "addr_chen"]

PAYMENTS = [
    ("addr_ana", 12000, "Cabin booking"),
    ("addr_ben", 4550, "Groceries"),
    ("addr_chen", 1999, "Fuel"),
]


async def seed_ledger(api_url: str) -> None:
    print("Seeding demo group via API...\n")

    async with httpx.AsyncClient(base_url=api_url, timeout=30.0) as client:
        response = await client.post("/v1/groups", json={"name": "Demo cabin trip"})
        response.raise_for_status()
        group_id = response.json()["id"]
        print(f"Created group {group_id}")

        for address in MEMBERS:
            response = await client.post(
                f"/v1/groups/{group_id}/members", json={"address": address}
            )
            if response.status_code == 201:
                print(f"Added member {address}")
            else:
                print(f"Failed for {address} - {response.status_code}: {response.text[:200]}")

        for payer, amount, description in PAYMENTS:
            response = await client.post(
                f"/v1/groups/{group_id}/payments",
                json={"payer": payer, "amount": amount, "description": description},
            )
            if response.status_code == 201:
                data = response.json()
                print(
                    f"{payer} paid {amount} for {description} "
                    f"(share={data['share']}, dropped={data['remainder']})"
                )
            else:
                print(f"Payment failed - {response.status_code}: {response.text[:200]}")

        print("\n--- Verification ---")
        summary = (await client.get(f"/v1/groups/{group_id}")).json()
        for member in summary["members"]:
            print(f"{member['address']:<12} {member['balance']:>8}")
        print(f"Balance sum: {summary['balance_sum']}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed a demo expense group")
    parser.add_argument("--api-url", default="http://localhost:8000")
    args = parser.parse_args()
    asyncio.run(seed_ledger(args.api_url))
