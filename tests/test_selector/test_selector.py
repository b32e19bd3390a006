"""Tests for the selector algebra."""

import pytest

from geocss.errors import ParseError
from geocss.filter import (
    ALWAYS,
    NEVER,
    Comparison,
    Conjunction,
    Disjunction,
    FeatureIdIn,
    Filters,
    Negation,
)
from geocss.selector import (
    EXCLUDE,
    AcceptSelector,
    AndSelector,
    ExpressionSelector,
    IdSelector,
    NotSelector,
    OrSelector,
    ParameterizedPseudoClass,
    PredicateSelector,
    PseudoClass,
    PseudoSelector,
    TypenameSelector,
    filter_opt,
    is_meta,
    simplify,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

FILTERS = Filters()

A = Comparison("a", "=", 1)
B = Comparison("b", "=", 2)

ACCEPT = AcceptSelector()
REJECT = NotSelector(AcceptSelector())
META = [
    TypenameSelector("roads"),
    PseudoSelector("scale", "<", "50000"),
    PseudoClass("stroke"),
    ParameterizedPseudoClass("nth-stroke", "2"),
]


def _wrap(predicate):
    return PredicateSelector(predicate)


def _reduce(selector):
    return filter_opt(selector, FILTERS)


class _RecordingFilters(Filters):
    """Filters that remembers which composite constructors were used."""

    def __init__(self):
        self.calls = []

    def negate(self, predicate):
        self.calls.append("negate")
        return super().negate(predicate)

    def and_(self, predicates):
        self.calls.append("and")
        return super().and_(predicates)

    def or_(self, predicates):
        self.calls.append("or")
        return super().or_(predicates)


# ---------------------------------------------------------------------------
# Atomic selectors
# ---------------------------------------------------------------------------


class TestDataSelectors:
    def test_accept(self):
        assert _reduce(ACCEPT) == ALWAYS

    def test_id(self):
        assert _reduce(IdSelector("roads.7")) == FeatureIdIn(("roads.7",))

    def test_wrapped_predicate(self):
        assert _reduce(_wrap(A)) == A

    def test_expression(self):
        selector = ExpressionSelector.parse("a = 1", FILTERS)
        assert _reduce(selector) == A

    def test_expression_fails_at_construction(self):
        with pytest.raises(ParseError):
            ExpressionSelector.parse("a = ", FILTERS)

    def test_expressions_compare_by_text(self):
        assert ExpressionSelector.parse("a = 1", FILTERS) == ExpressionSelector.parse(
            "a = 1", FILTERS
        )


class TestMetaSelectors:
    @pytest.mark.parametrize("selector", META)
    def test_no_filter(self, selector):
        assert _reduce(selector) is None

    @pytest.mark.parametrize("selector", META)
    def test_is_meta(self, selector):
        assert is_meta(selector) is True

    def test_compounds_are_not_meta(self):
        assert is_meta(NotSelector(PseudoClass("stroke"))) is False
        assert is_meta(IdSelector("x")) is False

    def test_not_a_selector(self):
        with pytest.raises(TypeError):
            filter_opt("roads", FILTERS)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# NOT
# ---------------------------------------------------------------------------


class TestNot:
    def test_constants_flip(self):
        assert _reduce(REJECT) == NEVER
        assert _reduce(NotSelector(_wrap(NEVER))) == ALWAYS

    def test_negates_predicate(self):
        assert _reduce(NotSelector(_wrap(A))) == Negation(A)

    def test_double_negation_cancels(self):
        assert _reduce(NotSelector(NotSelector(_wrap(A)))) == A
        assert _reduce(NotSelector(NotSelector(IdSelector("x")))) == _reduce(IdSelector("x"))

    def test_double_negation_does_not_build_negations(self):
        filters = _RecordingFilters()
        filter_opt(NotSelector(NotSelector(_wrap(A))), filters)
        assert filters.calls == []

    def test_triple_negation(self):
        assert _reduce(NotSelector(NotSelector(NotSelector(_wrap(A))))) == Negation(A)

    @pytest.mark.parametrize("selector", META)
    def test_meta_propagates_none(self, selector):
        assert _reduce(NotSelector(selector)) is None

    def test_double_negation_of_meta(self):
        assert _reduce(NotSelector(NotSelector(PseudoClass("fill")))) is None


# ---------------------------------------------------------------------------
# AND
# ---------------------------------------------------------------------------


class TestAnd:
    def test_empty_is_always(self):
        assert _reduce(AndSelector(())) == ALWAYS

    def test_never_absorbs(self):
        assert _reduce(AndSelector((_wrap(A), REJECT, _wrap(B)))) == NEVER

    def test_always_is_dropped(self):
        assert _reduce(AndSelector((ACCEPT, _wrap(A)))) == A

    def test_only_always(self):
        assert _reduce(AndSelector((ACCEPT, ACCEPT))) == ALWAYS

    def test_conjunction_keeps_order(self):
        assert _reduce(AndSelector((_wrap(B), ACCEPT, _wrap(A)))) == Conjunction((B, A))

    def test_single_operand_is_not_wrapped(self):
        filters = _RecordingFilters()
        assert filter_opt(AndSelector((_wrap(A),)), filters) == A
        assert filters.calls == []

    def test_meta_child_gives_none(self):
        assert _reduce(AndSelector((_wrap(A), PseudoClass("stroke")))) is None

    def test_none_wins_over_absorbing_never(self):
        assert _reduce(AndSelector((REJECT, TypenameSelector("roads")))) is None


# ---------------------------------------------------------------------------
# OR
# ---------------------------------------------------------------------------


class TestOr:
    def test_empty_is_never(self):
        assert _reduce(OrSelector(())) == NEVER

    def test_always_absorbs(self):
        assert _reduce(OrSelector((_wrap(A), ACCEPT, _wrap(B)))) == ALWAYS

    def test_never_is_dropped(self):
        assert _reduce(OrSelector((REJECT, _wrap(A)))) == A

    def test_only_never(self):
        assert _reduce(OrSelector((REJECT, _wrap(NEVER)))) == NEVER

    def test_disjunction_keeps_order(self):
        assert _reduce(OrSelector((_wrap(B), REJECT, _wrap(A)))) == Disjunction((B, A))

    def test_meta_child_gives_none(self):
        assert _reduce(OrSelector((ACCEPT, PseudoClass("stroke")))) is None


class TestNested:
    def test_absorbed_branch_disappears(self):
        selector = AndSelector((OrSelector((ACCEPT, _wrap(A))), _wrap(B)))
        assert _reduce(selector) == B

    def test_negated_conjunction(self):
        selector = NotSelector(AndSelector((_wrap(A), _wrap(B))))
        assert _reduce(selector) == Negation(Conjunction((A, B)))

    def test_meta_deep_inside(self):
        selector = OrSelector((_wrap(A), NotSelector(AndSelector((ACCEPT, PseudoClass("x"))))))
        assert _reduce(selector) is None


# ---------------------------------------------------------------------------
# simplify
# ---------------------------------------------------------------------------


class TestSimplify:
    def test_unchanged_without_never(self):
        selectors = [IdSelector("x"), TypenameSelector("roads"), PseudoClass("stroke")]
        assert simplify(selectors, FILTERS) == tuple(selectors)

    def test_collapses_to_exclude(self):
        assert simplify([IdSelector("x"), REJECT, TypenameSelector("t")], FILTERS) == (EXCLUDE,)

    def test_nested_never_collapses(self):
        nested = AndSelector((_wrap(A), _wrap(NEVER)))
        assert simplify([IdSelector("x"), nested], FILTERS) == (EXCLUDE,)

    def test_meta_compound_with_never_is_kept(self):
        selectors = [AndSelector((REJECT, PseudoClass("stroke")))]
        assert simplify(selectors, FILTERS) == tuple(selectors)

    def test_exclude_is_canonical_negated_accept(self):
        assert EXCLUDE == NotSelector(AcceptSelector())
        assert _reduce(EXCLUDE) == NEVER


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRendering:
    def test_atoms(self):
        assert str(ACCEPT) == "*"
        assert str(IdSelector("x")) == "#x"
        assert str(TypenameSelector("roads")) == "roads"
        assert str(PseudoSelector("scale", "<", "50000")) == "@scale<50000"
        assert str(PseudoClass("stroke")) == ":stroke"
        assert str(ParameterizedPseudoClass("nth-stroke", "2")) == ":nth-stroke(2)"
        assert str(ExpressionSelector.parse("a = 1", FILTERS)) == "a = 1"

    def test_compounds(self):
        selector = AndSelector((IdSelector("a"), OrSelector((ACCEPT, TypenameSelector("roads")))))
        assert str(selector) == "#a AND (* OR roads)"
        assert str(NotSelector(AndSelector((IdSelector("a"), IdSelector("b"))))) == "NOT (#a AND #b)"
