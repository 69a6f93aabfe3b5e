"""Search endpoint tests. Record store and audit emitter are overridden; actor resolution is real."""

from datetime import date
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from app.api.v1.dependencies import get_audit_emitter, get_record_store
from app.domain.exceptions import StoreUnavailableException
from app.infrastructure.security.jwt import create_access_token
from app.main import app


def _bearer(role: str, approval_status: str = "approved", sub: str = "user-1") -> dict[str, str]:
    token = create_access_token(
        {"sub": sub, "role": role, "approval_status": approval_status}
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def emitter() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def store(make_store, make_deceased, make_report):
    """Store with one public record, one restricted record and one report."""
    return make_store(
        deceased=[
            make_deceased(
                "Jane Doe",
                id="dr-jane",
                location_found="Thika Road",
                is_public_viewable=True,
            ),
            make_deceased(
                "John Doe",
                id="dr-john",
                distinguishing_marks="eagle tattoo",
                is_public_viewable=False,
            ),
        ],
        reports=[
            make_report(
                "KMP-2026-0141",
                id="pr-1",
                jurisdiction="Doe Valley",
                officer_notes="witness statement pending",
            )
        ],
    )


@pytest.fixture(autouse=True)
def _override(store, emitter) -> None:
    app.dependency_overrides[get_record_store] = lambda: store
    app.dependency_overrides[get_audit_emitter] = lambda: emitter


async def test_anonymous_search_sees_public_records_only(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"q": "doe"})
    assert response.status_code == 200
    data = response.json()
    assert [r["id"] for r in data["results"]] == ["dr-jane"]
    item = data["results"][0]
    assert item["kind"] == "deceased"
    assert item["display_name"] == "Jane Doe"
    assert item["relevance_score"] == pytest.approx(0.7)
    assert item["is_public"] is True
    assert "Thika Road" in item["display_summary"]
    assert data["truncated"] is False
    assert data["count"] == 1
    assert data["message"] is None


async def test_approved_police_sees_everything(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/search", params={"q": "doe"}, headers=_bearer("police")
    )
    assert response.status_code == 200
    ids = {r["id"] for r in response.json()["results"]}
    assert ids == {"dr-jane", "dr-john", "pr-1"}


async def test_unapproved_professional_searches_as_public(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/search",
        params={"q": "doe"},
        headers=_bearer("mortuary_staff", approval_status="pending"),
    )
    assert [r["id"] for r in response.json()["results"]] == ["dr-jane"]


async def test_invalid_token_searches_as_public(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/search",
        params={"q": "doe"},
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["results"]] == ["dr-jane"]


async def test_report_result_shape(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/search",
        params={"q": "valley", "scope": "reports"},
        headers=_bearer("admin"),
    )
    results = response.json()["results"]
    assert len(results) == 1
    assert results[0]["kind"] == "investigation_report"
    assert results[0]["display_name"] == "Case KMP-2026-0141"
    assert results[0]["is_public"] is False


@pytest.mark.parametrize("q", ["", "a", "  "])
async def test_short_query_returns_empty_without_store_read(
    client: AsyncClient, store, emitter, q: str
) -> None:
    response = await client.get("/api/v1/search", params={"q": q})
    assert response.status_code == 200
    assert response.json() == {
        "results": [],
        "truncated": False,
        "count": 0,
        "message": None,
    }
    assert store.reads == []
    emitter.emit_search_performed.assert_not_called()


async def test_missing_q_is_treated_as_empty(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search")
    assert response.status_code == 200
    assert response.json()["results"] == []


async def test_invalid_scope_is_rejected(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"q": "doe", "scope": "users"})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_overlong_query_is_rejected(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"q": "x" * 501})
    assert response.status_code == 422


async def test_truncated_response_includes_refine_message(
    client: AsyncClient, store, make_deceased
) -> None:
    store.deceased = [
        make_deceased(f"Wanjiru {i}", is_public_viewable=True) for i in range(120)
    ]
    response = await client.get("/api/v1/search", params={"q": "wanjiru"})
    data = response.json()
    assert data["count"] == 100
    assert data["truncated"] is True
    assert data["message"].startswith("Showing first 100 results.")


async def test_store_unavailable_returns_503(client: AsyncClient, store) -> None:
    store.list_deceased_records = AsyncMock(
        side_effect=StoreUnavailableException("OperationalError", "deceased")
    )
    response = await client.get(
        "/api/v1/search", params={"q": "doe"}, headers={"X-Request-ID": "req-503"}
    )
    assert response.status_code == 503
    assert response.json() == {
        "error": "STORE_UNAVAILABLE",
        "message": "Search temporarily unavailable, try again",
        "request_id": "req-503",
    }


async def test_audit_failure_does_not_fail_request(client: AsyncClient, emitter) -> None:
    emitter.emit_search_performed.side_effect = RuntimeError("audit sink down")
    response = await client.get("/api/v1/search", params={"q": "doe"})
    assert response.status_code == 200
    assert response.json()["count"] == 1


async def test_audit_event_carries_actor_and_excerpt(client: AsyncClient, emitter) -> None:
    await client.get(
        "/api/v1/search",
        params={"q": "  Thika  Road "},
        headers=_bearer("police", sub="officer-9"),
    )
    event = emitter.emit_search_performed.await_args.args[0]
    assert event.actor_role == "police"
    assert event.actor_id == "officer-9"
    assert event.query_excerpt == "thika road"
    assert event.result_count == 1


async def test_markup_in_stored_text_is_stripped(
    client: AsyncClient, store, make_deceased
) -> None:
    store.deceased = [
        make_deceased(
            "Amina <b>Hassan</b>",
            location_found="<script>alert(1)</script>Mombasa",
            is_public_viewable=True,
        )
    ]
    response = await client.get("/api/v1/search", params={"q": "amina"})
    item = response.json()["results"][0]
    assert "<" not in item["display_name"]
    assert "Amina" in item["display_name"]
    assert "script" not in item["display_summary"]
    assert "Mombasa" in item["display_summary"]


async def test_field_name_restricts_to_full_name(
    client: AsyncClient, store, make_deceased
) -> None:
    store.deceased.append(
        make_deceased("Mary Achieng", location_found="Doe Street", is_public_viewable=True)
    )
    response = await client.get("/api/v1/search", params={"q": "doe", "field": "name"})
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["results"]] == ["dr-jane"]


async def test_field_date_searches_date_of_death(
    client: AsyncClient, store, make_deceased
) -> None:
    store.deceased.append(
        make_deceased(
            "Mary Achieng",
            id="dr-mary",
            date_of_death=date(2026, 2, 14),
            is_public_viewable=True,
        )
    )
    response = await client.get(
        "/api/v1/search", params={"q": "2026-02-14", "field": "date"}
    )
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["results"]] == ["dr-mary"]


async def test_field_date_with_bad_date_is_400(client: AsyncClient, emitter) -> None:
    response = await client.get(
        "/api/v1/search", params={"q": "last tuesday", "field": "date"}
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"] == {"field": "q"}
    emitter.emit_search_performed.assert_not_called()


async def test_unknown_field_is_rejected(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"q": "doe", "field": "officer"})
    assert response.status_code == 422
