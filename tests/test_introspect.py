import functools
import json

import objectfactory
import pytest
from multipledispatch import dispatch

from curryer import InfoReport, NotSupported, curry, info, partial
from curryer import info as curryer_info
from targets import sample3, sample5


def test_info_before_any_argument():
    report = info(curry(sample3))
    assert report.target_identity is sample3
    assert report.mode_label == "Currying"
    assert report.function_arity == 3
    assert report.args_still_needed == 3
    assert report.args_collected == 0


def test_info_on_partial_application():
    report = info(partial(sample5, 1, 2))
    assert report.items() == [
        ("function", sample5),
        ("mode_label", "Partial application"),
        ("function_arity", 5),
        ("args_still_needed", 3),
        ("args_collected", 2),
    ]


@pytest.mark.parametrize("k", [0, 1, 2, 3, 4])
def test_info_tracks_curry_progress(k):
    step = curry(sample5)
    for arg in range(k):
        step = step(arg)
    report = info(step)
    assert report.args_collected == k
    assert report.args_still_needed == 5 - k
    assert report.function_arity == 5


def test_info_ignores_argument_shapes():
    step = partial(sample5, sample3, [1, 2], "atom")
    report = info(step)
    assert report.args_collected == 3
    assert report.target_identity is sample5


def test_info_is_idempotent():
    step = partial(sample5, 1)
    first = info(step)
    second = info(step)
    assert first == second
    assert step.collected == (1,)


@pytest.mark.parametrize("fun", [sample3, functools.partial(sample3, 1), len, lambda: None, 42])
def test_info_rejects_foreign_objects(fun):
    with pytest.raises(NotSupported):
        info(fun)


def test_report_flattens_to_json():
    report = info(partial(sample5, 1, 2))
    assert isinstance(report, InfoReport)
    payload = json.loads(report.flatten())
    assert payload["function"] == "sample5"
    assert payload["mode_label"] == "Partial application"
    assert payload["function_arity"] == 5
    assert payload["args_still_needed"] == 3
    assert payload["args_collected"] == 2


def test_report_loads_back_from_json():
    report = info(curry(sample3)(1))
    restored = objectfactory.create(json.loads(report.flatten()), object_type=InfoReport)
    assert isinstance(restored, InfoReport)
    assert restored.mode_label == "Currying"
    assert restored.function_arity == 3
    assert restored.args_still_needed == 2
    assert restored.args_collected == 1
    assert restored.target_identity is None


class SameTarget:
    def __init__(self, fn):
        self._fn = fn

    def __call__(self, a, b):
        return self._fn(a, b)

    def __eq__(self, other):
        return isinstance(other, SameTarget) and other._fn is self._fn

    def __hash__(self):
        return hash(self._fn)


def test_equal_reports_hash_equal():
    first = info(curry(SameTarget(max)))
    second = info(curry(SameTarget(max)))
    assert first.target_identity is not second.target_identity
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_reports_with_unhashable_targets_still_hash():
    class Unhashable(SameTarget):
        __hash__ = None

    report = info(partial(Unhashable(max), 1))
    assert hash(report) == hash(info(partial(Unhashable(max), 1)))


def test_other_dispatch_users_cannot_override_info():
    @dispatch(int)
    def info(x):
        return "replaced"

    assert info(42) == "replaced"
    with pytest.raises(NotSupported):
        curryer_info(42)
