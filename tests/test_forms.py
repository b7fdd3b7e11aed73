from __future__ import annotations

import pytest

from deformsense.core.vector import Vector
from deformsense.forms.store import UNLABELED, Form, FormStore


def test_form_stores_unit_directions() -> None:
    form = Form("grip", Vector([0.0, 3.0, 4.0]))
    (sample,) = form.samples
    assert sample.magnitude() == pytest.approx(1.0)
    assert form.is_labeled("grip")


def test_record_overwrites_and_add_appends() -> None:
    form = Form("a", [1.0, 0.0])
    form.add([0.0, 1.0])
    assert len(form) == 2

    form.record([1.0, 1.0])
    assert len(form) == 1


def test_recognize_returns_best_fit_across_samples() -> None:
    form = Form("a", [1.0, 0.0])
    form.add([0.0, 1.0])
    assert form.recognize([0.0, 2.0]) == pytest.approx(1.0)
    assert form.recognize([1.0, 1.0]) == pytest.approx(2 ** -0.5)


def test_recognize_never_scores_below_zero() -> None:
    form = Form("a", [1.0, 0.0])
    assert form.recognize([-1.0, 0.0]) == 0.0


def test_store_self_match_and_unknown_label() -> None:
    store = FormStore()
    store.record("A", Vector([0.2, 0.4, 0.6]))

    assert store.recognize("A", Vector([0.1, 0.2, 0.3])) == pytest.approx(1.0)
    assert store.recognize("B", Vector([0.1, 0.2, 0.3])) == 0.0


def test_store_record_overwrites_existing_label() -> None:
    store = FormStore()
    first = store.record("A", [1.0, 0.0])
    second = store.record("A", [0.0, 1.0])

    assert first is second
    assert len(store) == 1
    assert len(second) == 1
    assert store.recognize("A", [1.0, 0.0]) == pytest.approx(0.0)


def test_store_add_keeps_multiple_templates() -> None:
    store = FormStore()
    store.add(UNLABELED, [1.0, 0.0])
    store.add(UNLABELED, [0.0, 1.0])

    assert len(store.get(UNLABELED)) == 2
    assert store.recognize(UNLABELED, [1.0, 0.0]) == pytest.approx(1.0)
    assert store.recognize(UNLABELED, [0.0, 1.0]) == pytest.approx(1.0)


def test_store_iterates_in_recording_order() -> None:
    store = FormStore()
    for label in ("c", "a", "b"):
        store.record(label, [1.0])

    assert store.labels() == ["c", "a", "b"]
    assert [form.label for form in store] == ["c", "a", "b"]
    assert store.remove("a")
    assert not store.remove("a")
    assert "a" not in store
    store.clear()
    assert len(store) == 0
