from __future__ import annotations

from helpers import make_predator

from flockhunt.sim.core.world_view import WorldView
from flockhunt.sim.systems.sighting import sighting_pass


def _view_for(predators):
    view = WorldView()
    view.reset(predator.id for predator in predators)
    return view


def test_close_predators_see_each_other_exactly_once():
    predators = [
        make_predator(0, 100.0, 100.0),
        make_predator(1, 200.0, 100.0),
        make_predator(2, 100.0, 300.0),
    ]
    view = _view_for(predators)

    pairs = sighting_pass(predators, 250.0, view)

    assert pairs == 3
    for predator in predators:
        seen = [(p.x, p.y) for p in view.nearby_predators(predator.id)]
        others = [(o.position.x, o.position.y) for o in predators if o is not predator]
        assert sorted(seen) == sorted(others)
        assert (predator.position.x, predator.position.y) not in seen


def test_distant_predators_are_not_recorded():
    predators = [make_predator(0, 0.0, 0.0), make_predator(1, 500.0, 500.0)]
    view = _view_for(predators)

    assert sighting_pass(predators, 250.0, view) == 0
    assert view.nearby_predators(0) == ()
    assert view.nearby_predators(1) == ()


def test_sighting_is_symmetric_for_a_single_pair():
    predators = [make_predator(0, 0.0, 0.0), make_predator(1, 0.0, 250.0)]
    view = _view_for(predators)

    assert sighting_pass(predators, 250.0, view) == 1
    assert [(p.x, p.y) for p in view.nearby_predators(0)] == [(0.0, 250.0)]
    assert [(p.x, p.y) for p in view.nearby_predators(1)] == [(0.0, 0.0)]


def test_no_or_single_predator():
    assert sighting_pass([], 250.0, WorldView()) == 0
    lone = [make_predator(0, 1.0, 1.0)]
    view = _view_for(lone)
    assert sighting_pass(lone, 250.0, view) == 0
    assert view.nearby_predators(0) == ()
