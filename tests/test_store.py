from datetime import timedelta

from conftest import AFTER, BEFORE, RELEASE

from capsule_bot.store import Capsule


async def test_put_overwrites_previous_capsule(store):
    await store.put(1, "first")
    await store.put(1, "second")

    capsule = await store.get(1)
    assert capsule.text == "second"
    assert len(store) == 1


async def test_get_does_not_remove(store):
    await store.put(1, "keep me")
    await store.get(1)
    assert (await store.get(1)).text == "keep me"


async def test_get_unknown_user_is_none(store):
    assert await store.get(404) is None


async def test_take_without_capsule_reports_not_found(store):
    result = await store.take_if_ready(7, AFTER, RELEASE)

    assert not result.found
    assert not result.ready
    assert await store.user_ids() == []


async def test_take_before_release_keeps_capsule(store):
    await store.put(7, "not yet")

    result = await store.take_if_ready(7, BEFORE, RELEASE)

    assert result.found and not result.ready
    assert result.remaining == RELEASE - BEFORE
    assert (await store.get(7)).text == "not yet"


async def test_take_after_release_removes_capsule(store):
    await store.put(7, "now")

    first = await store.take_if_ready(7, AFTER, RELEASE)
    second = await store.take_if_ready(7, AFTER, RELEASE)

    assert first.ready and first.capsule.text == "now"
    assert not second.found


async def test_take_exactly_at_release_is_ready(store):
    await store.put(7, "on the dot")
    result = await store.take_if_ready(7, RELEASE, RELEASE)
    assert result.ready
    assert result.remaining == timedelta(0)


async def test_restore_puts_back_missing_capsule(store):
    assert await store.restore(Capsule(3, "lost in transit", BEFORE))
    assert (await store.get(3)).text == "lost in transit"


async def test_restore_does_not_clobber_newer_capsule(store):
    old = await store.put(3, "old")
    await store.take_if_ready(3, AFTER, RELEASE)
    await store.put(3, "new")

    assert not await store.restore(old)
    assert (await store.get(3)).text == "new"


async def test_user_ids_is_a_snapshot(store):
    await store.put(1, "a")
    await store.put(2, "b")

    ids = await store.user_ids()
    await store.take_if_ready(1, AFTER, RELEASE)

    assert sorted(ids) == [1, 2]
    assert await store.user_ids() == [2]
