"""Parallel check-ins, each on its own session and connection.

These run against whatever ``TEST_DATABASE_URI`` points at. On the default
SQLite file writers are serialised by the database lock; on PostgreSQL they
race for real.
"""
from __future__ import annotations

import asyncio

import pytest
from sqlalchemy import func, select

from studiodesk.core.exceptions import InsufficientCreditError
from studiodesk.db.models import Attendance, PlanType
from studiodesk.services.checkin import CheckInService


async def _attempt(session_factory, studio_id, session_id, member_id):
    async with session_factory() as session:
        try:
            return await CheckInService(session).check_in(studio_id, session_id, member_id)
        except InsufficientCreditError as exc:
            return exc


@pytest.mark.asyncio
async def test_concurrent_check_ins_never_over_consume(seed, session_factory, test_db):
    member = await seed.member()
    contract = await seed.contract(member, remaining_classes=3)
    sessions = [await seed.class_session() for _ in range(10)]

    outcomes = await asyncio.gather(
        *(
            _attempt(session_factory, seed.studio_id, s.id, member.id)
            for s in sessions
        )
    )

    successes = [o for o in outcomes if not isinstance(o, Exception)]
    refusals = [o for o in outcomes if isinstance(o, InsufficientCreditError)]
    assert len(successes) == 3
    assert len(refusals) == 7

    await seed.reload(contract)
    assert contract.remaining_classes == 0
    rows = await test_db.execute(
        select(func.count()).select_from(Attendance).where(Attendance.member_id == member.id)
    )
    assert rows.scalar_one() == 3


@pytest.mark.asyncio
async def test_concurrent_duplicates_resolve_to_one_creation(seed, session_factory, test_db):
    member = await seed.member()
    class_session = await seed.class_session()
    contract = await seed.contract(member, remaining_classes=1)

    outcomes = await asyncio.gather(
        *(
            _attempt(session_factory, seed.studio_id, class_session.id, member.id)
            for _ in range(2)
        )
    )

    assert sorted(o.created for o in outcomes) == [False, True]
    await seed.reload(contract)
    assert contract.remaining_classes == 0


@pytest.mark.asyncio
async def test_concurrent_unlimited_check_ins_leave_credit_null(seed, session_factory):
    member = await seed.member()
    plan = await seed.plan(PlanType.UNLIMITED)
    contract = await seed.contract(member, plan=plan)
    sessions = [await seed.class_session() for _ in range(5)]

    outcomes = await asyncio.gather(
        *(
            _attempt(session_factory, seed.studio_id, s.id, member.id)
            for s in sessions
        )
    )

    assert all(o.created for o in outcomes)
    await seed.reload(contract)
    assert contract.remaining_classes is None
