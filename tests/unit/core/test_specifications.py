"""Unit tests for the specification primitives.

Covers:
- ``matches``: look-ups, connectors, negation, empty ``Q``.
- ``BaseSpecification``: sort-key exclusivity, in-memory evaluation.
- Composition with ``&``, ``|`` and ``~``.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from django.db.models import Q

from modules.core.specifications import (
    MATCH_NOTHING,
    BaseSpecification,
    CompositeSpecification,
    matches,
)

pytestmark = pytest.mark.unit


def _row(**fields) -> SimpleNamespace:
    fields.setdefault("pk", 1)
    return SimpleNamespace(**fields)


class _ByAge(BaseSpecification):
    def __init__(self, minimum: int, descending: bool = False) -> None:
        super().__init__(Q(age__gte=minimum))
        if descending:
            self._apply_order_by_descending("age")
        else:
            self._apply_order_by("age")


class _Named(BaseSpecification):
    def __init__(self, name: str) -> None:
        super().__init__(Q(name__iexact=name))


class _Everything(BaseSpecification):
    def __init__(self) -> None:
        super().__init__()
        self._apply_order_by("name")


# ===========================================================================
# matches
# ===========================================================================


class TestMatches:
    def test_exact_lookup_is_default(self):
        assert matches(Q(name="Ann"), _row(name="Ann"))
        assert not matches(Q(name="Ann"), _row(name="ann"))

    def test_iexact(self):
        assert matches(Q(name__iexact="ANN"), _row(name="ann"))

    def test_icontains(self):
        assert matches(Q(name__icontains="MIT"), _row(name="Smith"))
        assert not matches(Q(name__icontains="x"), _row(name="Smith"))

    def test_icontains_empty_string_matches(self):
        assert matches(Q(name__icontains=""), _row(name="Smith"))

    def test_contains_is_case_sensitive(self):
        assert matches(Q(name__contains="mit"), _row(name="Smith"))
        assert not matches(Q(name__contains="MIT"), _row(name="Smith"))

    @pytest.mark.parametrize(
        "lookup, expected",
        [("gt", False), ("gte", True), ("lt", False), ("lte", True)],
    )
    def test_comparisons(self, lookup, expected):
        assert matches(Q(**{f"age__{lookup}": 30}), _row(age=30)) is expected

    def test_comparison_against_none_is_false(self):
        assert not matches(Q(age__gt=1), _row(age=None))

    def test_in_and_isnull(self):
        assert matches(Q(age__in=[1, 2]), _row(age=2))
        assert matches(Q(age__isnull=True), _row(age=None))
        assert not matches(Q(age__isnull=True), _row(age=3))

    def test_and_or_not(self):
        row = _row(name="Ann", age=40)
        assert matches(Q(name="Ann") & Q(age=40), row)
        assert not matches(Q(name="Ann") & Q(age=41), row)
        assert matches(Q(name="Bob") | Q(age=40), row)
        assert not matches(~Q(name="Ann"), row)

    def test_xor(self):
        row = _row(name="Ann", age=40)
        assert not matches(Q(name="Ann") ^ Q(age=40), row)
        assert matches(Q(name="Ann") ^ Q(age=41), row)

    def test_empty_q_matches_everything(self):
        assert matches(Q(), _row(name="anything"))

    def test_match_nothing(self):
        assert not matches(MATCH_NOTHING, _row(pk=5))


# ===========================================================================
# BaseSpecification
# ===========================================================================


class TestBaseSpecification:
    def test_no_criteria_is_satisfied_by_anything(self):
        spec = BaseSpecification()
        assert spec.criteria is None
        assert spec.is_satisfied_by(_row(name="x"))

    def test_exposes_sort_keys(self):
        ascending = _ByAge(18)
        descending = _ByAge(18, descending=True)
        assert (ascending.order_by, ascending.order_by_descending) == ("age", None)
        assert (descending.order_by, descending.order_by_descending) == (None, "age")

    def test_cannot_sort_both_directions(self):
        class _Both(BaseSpecification):
            def __init__(self) -> None:
                super().__init__()
                self._apply_order_by("age")
                self._apply_order_by_descending("age")

        with pytest.raises(ValueError, match="ascending"):
            _Both()

    def test_sort_keys_are_read_only(self):
        spec = _ByAge(18)
        with pytest.raises(AttributeError):
            spec.order_by = "name"

    def test_evaluate_filters_and_sorts_ascending(self):
        rows = [_row(age=50), _row(age=10), _row(age=20)]
        assert [r.age for r in _ByAge(18).evaluate(rows)] == [20, 50]

    def test_evaluate_sorts_descending(self):
        rows = [_row(age=20), _row(age=50), _row(age=30)]
        assert [r.age for r in _ByAge(18, descending=True).evaluate(rows)] == [50, 30, 20]

    def test_evaluate_without_sort_keeps_input_order(self):
        rows = [_row(name="b"), _row(name="a"), _row(name="B")]
        assert [r.name for r in _Named("b").evaluate(rows)] == ["b", "B"]


# ===========================================================================
# Composition
# ===========================================================================


class TestComposition:
    def test_and(self):
        spec = _ByAge(18) & _Named("ann")
        assert isinstance(spec, CompositeSpecification)
        assert spec.is_satisfied_by(_row(name="Ann", age=30))
        assert not spec.is_satisfied_by(_row(name="Ann", age=10))

    def test_or(self):
        spec = _ByAge(18) | _Named("ann")
        assert spec.is_satisfied_by(_row(name="Ann", age=10))
        assert not spec.is_satisfied_by(_row(name="Bob", age=10))

    def test_not(self):
        spec = ~_Named("ann")
        assert spec.is_satisfied_by(_row(name="Bob"))
        assert not spec.is_satisfied_by(_row(name="Ann"))

    def test_keeps_ordering_of_left_operand(self):
        assert (_ByAge(18) & _Named("x")).order_by == "age"
        assert (_Named("x") & _ByAge(18)).order_by is None
        assert (_ByAge(18, descending=True) | _Named("x")).order_by_descending == "age"

    def test_and_with_match_all_keeps_other_criteria(self):
        spec = _Everything() & _Named("ann")
        assert spec.criteria == Q(name__iexact="ann")
        assert spec.order_by == "name"

    def test_or_with_match_all_matches_everything(self):
        assert (_Everything() | _Named("ann")).criteria is None

    def test_negated_match_all_matches_nothing(self):
        assert not (~_Everything()).is_satisfied_by(_row(name="ann"))
