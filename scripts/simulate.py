"""
Traffic Simulation Script

Fires concurrent contact and order submissions at a running server after
a short pass over every menu endpoint.
Run from project root: python scripts/simulate.py

Use ENV_MODE=development on the server so no real email is sent.
"""

import asyncio
import random
import time
import argparse
from datetime import datetime
from typing import Any, Optional

import httpx

# Configuration
API_BASE_URL = "http://localhost:3001"
TOTAL_REQUESTS = 50

# Sample data for random submissions
FIRST_NAMES = ["John", "Jane", "Mike", "Sarah", "Tom", "Emma", "David", "Lisa", "Chris", "Amy"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Wilson", "Taylor"]
STREETS = ["Main St", "Broadway", "Park Ave", "Lake Road", "Hill Street", "Station Road"]
CITIES = ["Chennai", "Mumbai", "Bengaluru", "Pune", "Delhi"]
MESSAGES = [
    "Do you deliver on Sundays?",
    "Loved the pasta, thank you!",
    "Can I book a table for 8?",
    "Is the veggie burger vegan?",
]


def generate_random_customer() -> dict[str, str]:
    """Generate random customer info."""
    first = random.choice(FIRST_NAMES)
    last = random.choice(LAST_NAMES)
    return {
        "name": f"{first} {last}",
        "email": f"{first.lower()}.{last.lower()}@example.com",
        "phone": f"9{random.randint(100000000, 999999999)}",
        "street": f"{random.randint(1, 999)} {random.choice(STREETS)}",
        "city": random.choice(CITIES),
        "pincode": str(random.randint(110000, 699999)),
    }


def generate_order_payload(menu: list[dict[str, Any]]) -> dict[str, Any]:
    """Generate payload for /api/order from a listed menu item."""
    customer = generate_random_customer()
    item = random.choice(menu) if menu else {"foodName": "Cheese Pizza", "description": "", "price": "$9.19"}

    return {
        "name": customer["name"],
        "street": customer["street"],
        "city": customer["city"],
        "pincode": customer["pincode"],
        "phone": customer["phone"],
        "product": item["foodName"],
        "description": item["description"],
        "price": item["price"],
    }


def generate_contact_payload() -> dict[str, str]:
    """Generate payload for /api/contact."""
    customer = generate_random_customer()
    return {
        "name": customer["name"],
        "email": customer["email"],
        "password": f"pw{random.randint(1000, 9999)}",
        "about": random.choice(MESSAGES),
    }


async def send_request(
    client: httpx.AsyncClient,
    num: int,
    path: str,
    payload: dict[str, Any],
) -> dict[str, Any]:
    """POST one payload and time it."""
    start_time = time.time()

    try:
        response = await client.post(f"{API_BASE_URL}{path}", json=payload, timeout=30.0)
        elapsed = round(time.time() - start_time, 3)
        return {
            "num": num,
            "path": path,
            "success": response.status_code == 200,
            "error": None if response.status_code == 200 else response.text[:100],
            "time": elapsed,
        }
    except httpx.HTTPError as e:
        elapsed = round(time.time() - start_time, 3)
        return {
            "num": num,
            "path": path,
            "success": False,
            "error": str(e)[:100],
            "time": elapsed,
        }


# =============================================================================
# INDIVIDUAL FLOWS
# =============================================================================

async def test_single_flows() -> Optional[list[dict[str, Any]]]:
    """Exercise every menu endpoint once. Returns the menu, or None on failure."""
    print("\n" + "=" * 70)
    print("🧪 TESTING INDIVIDUAL FLOWS")
    print("=" * 70)

    async with httpx.AsyncClient(base_url=API_BASE_URL) as client:
        print("\n1️⃣ Health Check...")
        response = await client.get("/health")
        if response.status_code != 200:
            print(f"   ❌ Failed: {response.text}")
            return None
        data = response.json()
        print(f"   ✅ Status: {data.get('status')}")
        print(f"   Database: {data.get('database')}")
        print(f"   Mail: {data.get('mail_service')}")

        print("\n2️⃣ Insert / Update / Delete...")
        created = await client.post("/insert", json={
            "foodName": "Simulation Soup",
            "description": "Temporary item",
            "price": "$1.00",
            "image": "soup.jpg",
        })
        if created.status_code != 200:
            print(f"   ❌ Insert failed: {created.text}")
            return None
        item_id = created.json()["_id"]
        renamed = await client.put("/update", json={"id": item_id, "newFoodName": "Renamed Soup"})
        deleted = await client.delete(f"/delete/{item_id}")
        missing = await client.delete(f"/delete/{item_id}")
        print(f"   Insert: {created.status_code}  Update: {renamed.status_code}  "
              f"Delete: {deleted.status_code}  Delete again: {missing.status_code} (expect 404)")

        print("\n3️⃣ Menu...")
        menu = (await client.get("/read")).json()
        if not menu:
            seeded = await client.post("/seed")
            print(f"   Menu was empty, seeding: {seeded.text}")
            menu = (await client.get("/read")).json()
        print(f"   ✅ {len(menu)} menu items")

        print("\n4️⃣ Contact with missing field...")
        response = await client.post("/api/contact", json={"name": "Nobody"})
        print(f"   {response.status_code} (expect 400): {response.json().get('message')}")

    print("\n" + "=" * 70)
    return menu


# =============================================================================
# MAIN SIMULATION RUNNER
# =============================================================================

async def run_simulation(
    menu: list[dict[str, Any]],
    mode: str = "both",
    num_requests: int = TOTAL_REQUESTS,
) -> dict[str, Any]:
    """
    Run the concurrent simulation.

    Args:
        menu: Menu items used to fill order payloads
        mode: "orders", "contacts", or "both"
        num_requests: Number of submissions to fire
    """
    print("=" * 70)
    print("🔥 CONCURRENT SUBMISSION SIMULATION")
    print("=" * 70)
    print(f"📋 Total Requests: {num_requests}")
    print(f"🎯 Target: {API_BASE_URL}")
    print(f"🔧 Mode: {mode}")
    print(f"⏰ Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    start_time = time.time()

    async with httpx.AsyncClient() as client:
        tasks = []
        for i in range(num_requests):
            send_order = mode == "orders" or (mode == "both" and i % 2 == 0)
            if send_order:
                tasks.append(send_request(client, i + 1, "/api/order", generate_order_payload(menu)))
            else:
                tasks.append(send_request(client, i + 1, "/api/contact", generate_contact_payload()))
        results = await asyncio.gather(*tasks)

    total_time = round(time.time() - start_time, 2)

    successful = [r for r in results if r["success"]]
    failed = [r for r in results if not r["success"]]

    print("\n" + "=" * 70)
    print("📊 SIMULATION RESULTS")
    print("=" * 70)
    print(f"\n✅ Successful: {len(successful)}/{num_requests}")
    print(f"❌ Failed: {len(failed)}/{num_requests}")
    print(f"⏱️  Total Time: {total_time}s")

    for path in ("/api/order", "/api/contact"):
        subset = [r for r in results if r["path"] == path]
        if subset:
            ok = len([r for r in subset if r["success"]])
            print(f"   {path}: {ok}/{len(subset)} successful")

    if successful:
        avg_time = round(sum(r["time"] for r in successful) / len(successful), 3)
        print(f"\n📈 Performance Metrics:")
        print(f"   Average Response: {avg_time}s")
        print(f"   Fastest: {min(r['time'] for r in successful)}s")
        print(f"   Slowest: {max(r['time'] for r in successful)}s")

    if failed:
        print(f"\n⚠️  Failed Request Details (showing first 5):")
        for f in failed[:5]:
            print(f"   #{f['num']} [{f['path']}]: {f.get('error', 'Unknown error')}")

    print("=" * 70)

    return {
        "total": num_requests,
        "successful": len(successful),
        "failed": len(failed),
        "total_time": total_time,
        "results": results,
    }


async def main(mode: str, num_requests: int, skip_tests: bool) -> int:
    menu = []
    if not skip_tests:
        menu = await test_single_flows()
        if menu is None:
            print("\n❌ Pre-flight tests failed. Fix issues before running simulation.")
            return 1
        print("\n✅ Pre-flight tests passed!")

    summary = await run_simulation(menu, mode, num_requests)
    return 0 if not summary["failed"] else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Traffic Simulation Script")
    parser.add_argument("--orders-only", action="store_true", help="Send orders only")
    parser.add_argument("--contacts-only", action="store_true", help="Send contact messages only")
    parser.add_argument("--requests", type=int, default=TOTAL_REQUESTS, help="Number of submissions")
    parser.add_argument("--url", default=API_BASE_URL, help="Server base URL")
    parser.add_argument("--skip-tests", action="store_true", help="Skip individual flows")
    args = parser.parse_args()

    API_BASE_URL = args.url.rstrip("/")

    if args.orders_only:
        mode = "orders"
    elif args.contacts_only:
        mode = "contacts"
    else:
        mode = "both"

    raise SystemExit(asyncio.run(main(mode, args.requests, args.skip_tests)))
