import pytest

from cubeworld.ecs import ECS, ENTITY_NONE, Component, Entity, Event, System


def test_new_entities_get_increasing_ids_and_slots():
    ecs = ECS(world="w")
    a = ecs.new()
    b = ecs.new()
    assert (a.id, a.index) == (1, 0)
    assert (b.id, b.index) == (2, 1)
    assert a.ecs is ecs
    assert ecs.world == "w"


def test_add_get_has_remove():
    ecs = ECS(None)
    e = ecs.new()
    assert not ecs.has(e, Component.POSITION)
    ecs.add(e, Component.POSITION, {"x": 1})
    assert ecs.has(e, Component.POSITION)
    assert ecs.get(e, Component.POSITION) == {"x": 1}
    ecs.remove(e, Component.POSITION)
    assert not ecs.has(e, Component.POSITION)


def test_add_twice_raises():
    ecs = ECS(None)
    e = ecs.new()
    ecs.add(e, Component.CAMERA, 1)
    with pytest.raises(ValueError):
        ecs.add(e, Component.CAMERA, 2)


def test_get_and_remove_missing_raise():
    ecs = ECS(None)
    e = ecs.new()
    with pytest.raises(KeyError):
        ecs.get(e, Component.LIGHT)
    with pytest.raises(KeyError):
        ecs.remove(e, Component.LIGHT)


def test_delete_frees_slot_for_reuse_with_new_id():
    ecs = ECS(None)
    a = ecs.new()
    ecs.new()
    ecs.add(a, Component.PHYSICS, "p")
    ecs.delete(a)
    assert not ecs.has(a, Component.PHYSICS)
    c = ecs.new()
    assert c.index == a.index
    assert c.id not in (1, 2)
    assert c.id != ENTITY_NONE


def test_delete_unknown_raises():
    ecs = ECS(None)
    e = ecs.new()
    ecs.delete(e)
    with pytest.raises(KeyError):
        ecs.delete(e)


def test_capacity_doubles_when_full():
    ecs = ECS(None)
    start = ecs.capacity
    entities = [ecs.new() for _ in range(start + 1)]
    assert ecs.capacity == start * 2
    assert len({e.index for e in entities}) == start + 1
    assert entities[-1].index == start


def test_init_and_destroy_callbacks():
    calls = []
    ecs = ECS(None)
    ecs.register(
        Component.MOVEMENT,
        System(
            init=lambda value, ent: calls.append(("init", value, ent.id)),
            destroy=lambda value, ent: calls.append(("destroy", value, ent.id)),
        ),
    )
    e = ecs.new()
    ecs.add(e, Component.MOVEMENT, "m")
    ecs.remove(e, Component.MOVEMENT)
    ecs.add(e, Component.MOVEMENT, "n")
    ecs.delete(e)
    assert calls == [
        ("init", "m", e.id),
        ("destroy", "m", e.id),
        ("init", "n", e.id),
        ("destroy", "n", e.id),
    ]


def test_event_order_component_then_slot():
    seen = []
    ecs = ECS(None)
    ecs.register(Component.PHYSICS, System(tick=lambda v, ent: seen.append(("phys", v))))
    ecs.register(Component.POSITION, System(tick=lambda v, ent: seen.append(("pos", v))))
    a = ecs.new()
    b = ecs.new()
    ecs.add(b, Component.POSITION, "pb")
    ecs.add(a, Component.POSITION, "pa")
    ecs.add(a, Component.PHYSICS, "xa")
    ecs.event(Event.TICK)
    assert seen == [("pos", "pa"), ("pos", "pb"), ("phys", "xa")]


def test_event_passes_entity_handle():
    seen = []
    ecs = ECS(None)
    ecs.register(Component.DEBUG, System(render=lambda v, ent: seen.append(ent)))
    e = ecs.new()
    ecs.add(e, Component.DEBUG, True)
    ecs.event(Event.RENDER)
    ecs.event(Event.UPDATE)
    assert seen == [Entity(e.id, e.index)]


def test_default_factory_used_without_value():
    ecs = ECS(None)
    ecs.register(Component.CONTROL, System(default=lambda: {"sensitivity": 0}))
    a = ecs.new()
    b = ecs.new()
    ecs.add(a, Component.CONTROL)
    ecs.add(b, Component.CONTROL)
    ecs.get(a, Component.CONTROL)["sensitivity"] = 3
    assert ecs.get(b, Component.CONTROL) == {"sensitivity": 0}


def test_register_discards_existing_values():
    ecs = ECS(None)
    e = ecs.new()
    ecs.add(e, Component.LIGHT, 5)
    ecs.register(Component.LIGHT, System())
    assert not ecs.has(e, Component.LIGHT)


def test_system_subscriber_lookup():
    def f(value, ent):
        return None

    system = System(update=f)
    assert system.subscriber(Event.UPDATE) is f
    assert system.subscriber(Event.TICK) is None