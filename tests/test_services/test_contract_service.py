from __future__ import annotations

import datetime as dt
import time
from uuid import uuid4

import pytest

from studiodesk.core.exceptions import InvalidStateError, NotFoundError
from studiodesk.db.models import ContractStatus, PlanType
from studiodesk.services.contracts import ContractService


def utc_date() -> dt.date:
    return dt.datetime.now(dt.timezone.utc).date()


@pytest.fixture(params=["Etc/GMT+12", "Etc/GMT-14"])
def distant_local_zone(request, monkeypatch):
    """Run with a local zone whose calendar day often differs from UTC."""

    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable")
    monkeypatch.setenv("TZ", request.param)
    time.tzset()
    yield request.param
    monkeypatch.undo()
    time.tzset()


@pytest.mark.asyncio
async def test_create_snapshots_limited_plan(seed, test_db):
    member = await seed.member()
    plan = await seed.plan(PlanType.LIMITED, class_limit=8)

    contract = await ContractService(test_db).create(
        seed.studio_id, member.id, plan.id, start_date=dt.date(2026, 1, 1)
    )
    await test_db.commit()

    assert contract.status == ContractStatus.ACTIVE
    assert contract.plan_type_snapshot == PlanType.LIMITED
    assert contract.class_limit_snapshot == 8
    assert contract.remaining_classes == 8

    # later plan edits never reach an existing contract
    plan.class_limit = 20
    await test_db.commit()
    await seed.reload(contract)
    assert contract.class_limit_snapshot == 8
    assert contract.remaining_classes == 8


@pytest.mark.asyncio
async def test_create_unlimited_has_no_remaining_classes(seed, test_db):
    member = await seed.member()
    plan = await seed.plan(PlanType.UNLIMITED)

    contract = await ContractService(test_db).create(
        seed.studio_id, member.id, plan.id, start_date=dt.date.today()
    )

    assert contract.plan_type_snapshot == PlanType.UNLIMITED
    assert contract.class_limit_snapshot is None
    assert contract.remaining_classes is None


@pytest.mark.asyncio
async def test_create_rejects_inactive_and_misconfigured_plans(seed, test_db):
    member = await seed.member()
    inactive = await seed.plan(is_active=False)
    broken = await seed.plan(PlanType.LIMITED, class_limit=0)
    service = ContractService(test_db)

    with pytest.raises(InvalidStateError, match="plan is not active"):
        await service.create(seed.studio_id, member.id, inactive.id, dt.date.today())
    with pytest.raises(InvalidStateError, match="misconfigured"):
        await service.create(seed.studio_id, member.id, broken.id, dt.date.today())


@pytest.mark.asyncio
async def test_create_requires_member_and_plan_in_studio(seed, test_db):
    member = await seed.member()
    plan = await seed.plan()
    service = ContractService(test_db)

    with pytest.raises(NotFoundError, match="member not found"):
        await service.create(seed.studio_id, uuid4(), plan.id, dt.date.today())
    with pytest.raises(NotFoundError, match="plan not found"):
        await service.create(seed.studio_id, member.id, uuid4(), dt.date.today())
    with pytest.raises(NotFoundError, match="member not found"):
        await service.create(uuid4(), member.id, plan.id, dt.date.today())


@pytest.mark.asyncio
async def test_pause_only_from_active(seed, test_db, distant_local_zone):
    member = await seed.member()
    contract = await seed.contract(member, remaining_classes=5)
    service = ContractService(test_db)
    until = dt.date.today() + dt.timedelta(days=14)

    paused = await service.pause(seed.studio_id, contract.id, paused_until=until)

    assert paused.status == ContractStatus.PAUSED
    assert paused.paused_from == utc_date()
    assert paused.paused_until == until
    assert paused.remaining_classes == 5

    with pytest.raises(InvalidStateError, match="only ACTIVE contracts can be paused"):
        await service.pause(seed.studio_id, contract.id)


@pytest.mark.asyncio
async def test_cancel_sets_end_date_once(seed, test_db, distant_local_zone):
    member = await seed.member()
    contract = await seed.contract(member, remaining_classes=3)
    service = ContractService(test_db)

    cancelled = await service.cancel(seed.studio_id, contract.id)

    assert cancelled.status == ContractStatus.CANCELLED
    assert cancelled.end_date == utc_date()
    assert cancelled.remaining_classes == 3

    with pytest.raises(InvalidStateError, match="contract is already cancelled"):
        await service.cancel(seed.studio_id, contract.id)


@pytest.mark.asyncio
async def test_cancel_keeps_existing_end_date(seed, test_db):
    member = await seed.member()
    contract = await seed.contract(member, status=ContractStatus.PAUSED)
    contract.end_date = dt.date(2030, 6, 30)
    await test_db.commit()

    cancelled = await ContractService(test_db).cancel(seed.studio_id, contract.id)

    assert cancelled.end_date == dt.date(2030, 6, 30)


@pytest.mark.asyncio
async def test_contract_in_other_studio_is_not_found(seed, test_db):
    member = await seed.member()
    contract = await seed.contract(member)

    with pytest.raises(NotFoundError, match="contract not found"):
        await ContractService(test_db).cancel(uuid4(), contract.id)
