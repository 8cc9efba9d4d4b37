"""Property-based tests for the functor and monad laws."""

from hypothesis import given
from hypothesis import strategies as st

from strategies import eithers, exceptions, integers, lefts, texts
from tryeither import Bottom, Left, Right, TInt, Try, partition


def inc(x: int) -> int:
    return x + 1


def dbl(x: int) -> int:
    return x * 2


def right_half(x: int):
    return Right(x // 2) if x % 2 == 0 else Left('odd')


def try_half(x: int) -> Try[int]:
    return Try(lambda: 10 // x)


class TestEitherFunctorLaws:
    """map respects identity and composition."""

    @given(eithers)
    def test_identity(self, either):
        """Mapping the identity function changes nothing."""
        assert either.map(lambda x: x) == either

    @given(eithers)
    def test_composition(self, either):
        """Mapping a composition equals composing the maps."""
        assert either.map(lambda x: dbl(inc(x))) == either.map(inc).map(dbl)


class TestEitherMonadLaws:
    """bind respects identity and associativity."""

    @given(integers)
    def test_left_identity(self, x):
        """Right(x).bind(f) is f(x)."""
        assert Right(x).bind(right_half) == right_half(x)

    @given(eithers)
    def test_right_identity(self, either):
        """Binding the Right constructor changes nothing."""
        assert either.bind(Right) == either

    @given(eithers)
    def test_associativity(self, either):
        """Nested and sequential binds agree."""
        assert either.bind(right_half).bind(right_half) == either.bind(lambda x: right_half(x).bind(right_half))


class TestEitherShortCircuit:
    """Left and Bottom absorb combinators."""

    @given(lefts, integers)
    def test_left_absorbs_arithmetic(self, left, n):
        """A Left operand is the result of any arithmetic."""
        assert left.add(TInt, Right(n)) == left
        assert Right(n).product(TInt, left) == left

    @given(integers)
    def test_rejecting_filter_is_bottom(self, n):
        """A rejecting filter always yields Bottom."""
        assert Right(n).filter(lambda _: False) is Bottom

    @given(st.lists(st.one_of(integers.map(Right), texts.map(Left))))
    def test_partition_preserves_order(self, items):
        """partition keeps the input order within each side."""
        ls, rs = partition(iter(items))
        assert list(ls) == [e.value for e in items if e.is_left()]
        assert list(rs) == [e.value for e in items if e.is_right()]


class TestTryLaws:
    """map and bind laws for Try."""

    @given(integers)
    def test_functor_identity(self, x):
        """Mapping the identity function changes nothing."""
        assert Try.success(x).map(lambda v: v) == Try.success(x)

    @given(integers)
    def test_functor_composition(self, x):
        """Mapping a composition equals composing the maps."""
        assert Try.success(x).map(lambda v: dbl(inc(v))) == Try.success(x).map(inc).map(dbl)

    @given(st.integers(min_value=-100, max_value=100))
    def test_left_identity(self, x):
        """Try.success(x).bind(f) has the same outcome as f(x)."""
        bound = Try.success(x).bind(try_half).run()
        direct = try_half(x).run()
        if direct.is_fail():
            assert type(bound.error) is type(direct.error)
        else:
            assert bound == direct

    @given(integers)
    def test_right_identity(self, x):
        """Binding Try.success changes nothing."""
        assert Try.success(x).bind(Try.success) == Try.success(x)

    @given(exceptions)
    def test_failure_is_preserved(self, error):
        """A failure passes through map and bind with the same error."""
        t = Try.failure(error).map(inc).bind(try_half).filter(bool)
        assert t.run().error is error
