"""End-to-end tests for requests served concurrently.

Requests for different tenants are interleaved on one event loop; every
write must be persisted and every listing must stay scoped to its caller.
"""

import asyncio

import pytest
import pytest_asyncio

pytestmark = pytest.mark.integration

WRITES_PER_TENANT = 5


@pytest.fixture(params=["memory", "file"])
def database_url(request, tmp_path) -> str:
    """Run each test against in-memory and file-backed SQLite."""
    if request.param == "file":
        return f"sqlite+aiosqlite:///{tmp_path}/contacts.db"
    return "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def tenants(create_tenant):
    return {
        "tenant-a": await create_tenant("tenant-a"),
        "tenant-b": await create_tenant("tenant-b"),
    }


class TestConcurrentWrites:
    """Interleaved writes from two tenants."""

    @pytest.mark.asyncio
    async def test_every_write_is_persisted_for_its_tenant(self, async_client, tenants):
        requests = [
            async_client.post(
                "/categories",
                json={"categoryName": f"{username}-{i}"},
                headers=headers,
            )
            for i in range(WRITES_PER_TENANT)
            for username, headers in tenants.items()
        ]

        responses = await asyncio.gather(*requests)

        assert [r.status_code for r in responses] == [201] * len(requests)
        for username, headers in tenants.items():
            listed = await async_client.get(
                "/categories", params={"pageSize": 100}, headers=headers
            )
            names = sorted(c["categoryName"] for c in listed.json()["items"])
            assert listed.json()["totalElements"] == WRITES_PER_TENANT
            assert names == [f"{username}-{i}" for i in range(WRITES_PER_TENANT)]

    @pytest.mark.asyncio
    async def test_interleaved_reads_see_only_own_data(self, async_client, tenants):
        for username, headers in tenants.items():
            response = await async_client.post(
                "/contacts",
                json={"contactName": username, "phone": "555-0100"},
                headers=headers,
            )
            assert response.status_code == 201, response.text

        order = list(tenants) * WRITES_PER_TENANT
        responses = await asyncio.gather(
            *(async_client.get("/contacts", headers=tenants[u]) for u in order)
        )

        for username, response in zip(order, responses, strict=True):
            assert response.status_code == 200
            assert [c["contactName"] for c in response.json()["items"]] == [username]
