async def test_consume_clears_flag_once(tracker):
    await tracker.begin_waiting(10)

    assert await tracker.consume_if_waiting(10)
    assert not await tracker.consume_if_waiting(10)
    assert not await tracker.is_waiting(10)


async def test_consume_without_begin_is_false(tracker):
    assert not await tracker.consume_if_waiting(10)


async def test_flags_are_per_chat(tracker):
    await tracker.begin_waiting(10)

    assert not await tracker.is_waiting(11)
    assert not await tracker.consume_if_waiting(11)
    assert await tracker.is_waiting(10)


async def test_begin_twice_still_single_flag(tracker):
    await tracker.begin_waiting(10)
    await tracker.begin_waiting(10)

    assert await tracker.consume_if_waiting(10)
    assert not await tracker.consume_if_waiting(10)
