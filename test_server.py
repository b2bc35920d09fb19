#!/usr/bin/env python3
"""
Smoke test script for the Social Feed Backend.
Runs a short end-to-end session against a live server (python run.py).
"""

import asyncio
import uuid
import httpx

BASE_URL = "http://127.0.0.1:8000"
API = f"{BASE_URL}/api/v1"


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def register(client: httpx.AsyncClient, name: str) -> dict:
    username = f"{name.lower()}_{uuid.uuid4().hex[:6]}"
    response = await client.post(
        f"{API}/auth/register",
        json={"username": username, "password": "secret123", "name": name}
    )
    response.raise_for_status()
    return response.json()


async def check_health_endpoint():
    """Test the health check endpoint."""
    print("Testing health endpoint...")

    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(f"{BASE_URL}/health")
            print(f"Status: {response.status_code}")
            print(f"Response: {response.json()}")
            return response.status_code == 200
        except Exception as e:
            print(f"Health check failed: {e}")
            return False


async def check_root_endpoint():
    """Test the root endpoint."""
    print("\nTesting root endpoint...")

    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(f"{BASE_URL}/")
            print(f"Status: {response.status_code}")
            print(f"Response: {response.json()}")
            return response.status_code == 200
        except Exception as e:
            print(f"Root endpoint failed: {e}")
            return False


async def check_friend_feed_flow():
    """Two users become friends and see each other's posts."""
    print("\nTesting friend request and feed flow...")

    async with httpx.AsyncClient() as client:
        try:
            alice = await register(client, "Alice")
            bob = await register(client, "Bob")

            post = await client.post(
                f"{API}/posts",
                json={"content": "hello"},
                headers=auth_headers(alice["access_token"])
            )
            post_id = post.json()["id"]

            request = await client.post(
                f"{API}/friends/request",
                json={"friend_id": bob["user_id"]},
                headers=auth_headers(alice["access_token"])
            )
            request_id = request.json()["id"]

            await client.put(
                f"{API}/friends/request/{request_id}/accept",
                headers=auth_headers(bob["access_token"])
            )

            feed = await client.get(f"{API}/posts", headers=auth_headers(bob["access_token"]))
            post_ids = [p["id"] for p in feed.json()["posts"]]
            print(f"Bob's feed: {post_ids}")
            return post_id in post_ids
        except Exception as e:
            print(f"Friend/feed flow failed: {e}")
            return False


async def run_all_tests():
    """Run all checks sequentially."""
    print("Starting Social Feed Backend smoke tests")
    print("=" * 60)

    tests = [
        ("Health Check", check_health_endpoint),
        ("Root Endpoint", check_root_endpoint),
        ("Friend Feed Flow", check_friend_feed_flow),
    ]

    results = []

    for test_name, test_func in tests:
        print(f"\n{'=' * 20} {test_name} {'=' * 20}")
        try:
            result = await test_func()
            results.append((test_name, result))
        except Exception as e:
            print(f"{test_name} crashed: {e}")
            results.append((test_name, False))

    # Summary
    print(f"\n{'=' * 60}")
    print("TEST SUMMARY")
    print("=" * 60)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for test_name, result in results:
        status = "PASS" if result else "FAIL"
        print(f"{test_name:.<30} {status}")

    print(f"\nTotal: {passed}/{total} tests passed")


if __name__ == "__main__":
    print(f"Make sure the server is running on {BASE_URL}")
    print("Run: python run.py")
    print()

    try:
        asyncio.run(run_all_tests())
    except KeyboardInterrupt:
        print("\nTests interrupted by user")
