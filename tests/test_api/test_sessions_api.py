from __future__ import annotations

import datetime as dt
from uuid import uuid4

import pytest
from fastapi import status

from studiodesk.core.config import settings
from studiodesk.db.models import SessionStatus

API_PREFIX = f"{settings.API_PREFIX}/v1"


@pytest.mark.asyncio
async def test_schedule_session_and_check_in(client, headers, seed):
    created = await client.post(
        f"{API_PREFIX}/sessions",
        json={
            "class_type": " Spin ",
            "coach": "Marta",
            "starts_at": "2026-11-02T07:00:00Z",
            "ends_at": "2026-11-02T07:45:00Z",
            "capacity": 20,
        },
        headers=headers,
    )
    assert created.status_code == status.HTTP_201_CREATED, created.text
    session = created.json()["data"]
    assert session["class_type"] == "Spin"
    assert session["status"] == "SCHEDULED"
    assert session["capacity"] == 20

    fetched = await client.get(f"{API_PREFIX}/sessions/{session['id']}", headers=headers)
    assert fetched.status_code == status.HTTP_200_OK
    assert fetched.json()["data"]["coach"] == "Marta"

    member = await seed.member()
    await seed.contract(member)
    check_in = await client.post(
        f"{API_PREFIX}/attendance/check-in",
        json={"session_id": session["id"], "member_id": str(member.id)},
        headers=headers,
    )
    assert check_in.status_code == status.HTTP_201_CREATED, check_in.text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"ends_at": "2026-11-02T07:00:00Z"},
        {"ends_at": "2026-11-02T06:30:00Z"},
        {"capacity": 0},
        {"capacity": -3},
        {"class_type": "   "},
        {"starts_at": "next tuesday"},
        {"status": "POSTPONED"},
    ],
)
async def test_schedule_session_validation(client, headers, overrides):
    body = {
        "class_type": "Spin",
        "starts_at": "2026-11-02T07:00:00Z",
        "capacity": 20,
        **overrides,
    }

    response = await client.post(f"{API_PREFIX}/sessions", json=body, headers=headers)

    assert response.status_code == status.HTTP_400_BAD_REQUEST, response.text
    assert response.json()["message"] == "validation error"


@pytest.mark.asyncio
async def test_offset_timestamps_are_compared_in_utc(client, headers):
    # 09:30+02:00 is 07:30Z, so it ends after a 07:00Z start
    response = await client.post(
        f"{API_PREFIX}/sessions",
        json={
            "class_type": "Yoga",
            "starts_at": "2026-11-02T07:00:00Z",
            "ends_at": "2026-11-02T09:30:00+02:00",
            "capacity": 10,
        },
        headers=headers,
    )

    assert response.status_code == status.HTTP_201_CREATED, response.text


@pytest.mark.asyncio
async def test_list_sessions_filters(client, headers, seed):
    utc = dt.timezone.utc
    first = await seed.class_session(starts_at=dt.datetime(2026, 3, 1, 9, 0, tzinfo=utc))
    second = await seed.class_session(starts_at=dt.datetime(2026, 3, 2, 23, 30, tzinfo=utc))
    third = await seed.class_session(
        starts_at=dt.datetime(2026, 3, 3, 9, 0, tzinfo=utc), status=SessionStatus.CANCELLED
    )
    await seed.class_session(studio_id=uuid4())

    everything = await client.get(f"{API_PREFIX}/sessions", headers=headers)
    assert everything.status_code == status.HTTP_200_OK
    assert [s["id"] for s in everything.json()["data"]] == [
        str(first.id),
        str(second.id),
        str(third.id),
    ]

    window = await client.get(
        f"{API_PREFIX}/sessions",
        params={"from": "2026-03-02", "to": "2026-03-02"},
        headers=headers,
    )
    assert [s["id"] for s in window.json()["data"]] == [str(second.id)]

    cancelled = await client.get(
        f"{API_PREFIX}/sessions", params={"status": "cancelled"}, headers=headers
    )
    assert [s["id"] for s in cancelled.json()["data"]] == [str(third.id)]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params, message",
    [
        ({"status": "DONE"}, "invalid status query, expected: SCHEDULED, CANCELLED"),
        ({"from": "03/01/2026"}, "invalid from date, expected YYYY-MM-DD"),
        ({"to": "2026-13-01"}, "invalid to date, expected YYYY-MM-DD"),
    ],
)
async def test_list_sessions_rejects_malformed_filters(client, headers, params, message):
    response = await client.get(f"{API_PREFIX}/sessions", params=params, headers=headers)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == message


@pytest.mark.asyncio
async def test_session_lookup_is_scoped_to_studio(client, headers, seed):
    class_session = await seed.class_session()

    foreign = await client.get(
        f"{API_PREFIX}/sessions/{class_session.id}",
        headers={settings.TENANT_HEADER: str(uuid4())},
    )
    assert foreign.status_code == status.HTTP_404_NOT_FOUND
    assert foreign.json()["message"] == "session not found"

    malformed = await client.get(f"{API_PREFIX}/sessions/nope", headers=headers)
    assert malformed.status_code == status.HTTP_400_BAD_REQUEST
    assert malformed.json()["message"] == "invalid session id"


@pytest.mark.asyncio
async def test_cancel_session_blocks_check_in(client, headers, seed):
    member = await seed.member()
    class_session = await seed.class_session()
    await seed.contract(member)

    cancelled = await client.post(
        f"{API_PREFIX}/sessions/{class_session.id}/cancel", headers=headers
    )
    assert cancelled.status_code == status.HTTP_200_OK, cancelled.text
    assert cancelled.json()["data"]["status"] == "CANCELLED"

    again = await client.post(
        f"{API_PREFIX}/sessions/{class_session.id}/cancel", headers=headers
    )
    assert again.status_code == status.HTTP_400_BAD_REQUEST
    assert again.json()["message"] == "session is already cancelled"

    check_in = await client.post(
        f"{API_PREFIX}/attendance/check-in",
        json={"session_id": str(class_session.id), "member_id": str(member.id)},
        headers=headers,
    )
    assert check_in.status_code == status.HTTP_400_BAD_REQUEST
    assert check_in.json()["message"] == "session is cancelled"
