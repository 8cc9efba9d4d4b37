"""Tests for decorators: @trying, @do, @do_try."""

import pytest

from tryeither import Bottom, Left, Right, Success, Try, do, do_try, trying


class TestTryingDecorator:
    """Tests for @trying decorator."""

    def test_trying_returns_lazy_try(self):
        """@trying defers the call until the Try is inspected."""
        calls: list[tuple[int, int]] = []

        @trying
        def divide(a: int, b: int) -> float:
            calls.append((a, b))
            return a / b

        result = divide(10, 2)
        assert isinstance(result, Try)
        assert calls == []
        assert result.run() == Success(5.0)
        assert calls == [(10, 2)]

    def test_trying_captures_exception(self):
        """@trying turns a raised exception into a failure."""

        @trying
        def divide(a: int, b: int) -> float:
            return a / b

        outcome = divide(10, 0).run()
        assert isinstance(outcome.error, ZeroDivisionError)

    def test_trying_memoizes_by_default(self):
        """The returned Try runs the function once."""
        calls: list[int] = []

        @trying
        def tick() -> int:
            calls.append(1)
            return len(calls)

        t = tick()
        t.run()
        t.run()
        assert calls == [1]

    def test_trying_memoize_false(self):
        """@trying(memoize=False) re-runs on every inspection."""
        calls: list[int] = []

        @trying(memoize=False)
        def tick() -> int:
            calls.append(1)
            return len(calls)

        t = tick()
        assert t.run() == Success(1)
        assert t.run() == Success(2)

    def test_trying_preserves_metadata(self):
        """@trying keeps the wrapped function's name and docstring."""

        @trying
        def load() -> int:
            """Load a value."""
            return 1

        assert load.__name__ == 'load'
        assert load.__doc__ == 'Load a value.'

    def test_trying_on_method(self):
        """@trying works on methods."""

        class Parser:
            @trying
            def parse(self, raw: str) -> int:
                return int(raw)

        parser = Parser()
        assert parser.parse('12') == Try.success(12)
        assert parser.parse('x').is_fail()


class TestDoDecorator:
    """Tests for @do with Either."""

    def test_do_all_right(self):
        """Right values are unwrapped and the return is wrapped."""

        @do
        def total():
            x = yield Right(1)
            y = yield Right(2)
            return x + y

        assert total() == Right(3)

    def test_do_left_short_circuits(self):
        """The first Left is returned and the rest never runs."""
        reached: list[str] = []

        @do
        def total():
            x = yield Right(1)
            y = yield Left('bad')
            reached.append('after')
            return x + y

        assert total() == Left('bad')
        assert reached == []

    def test_do_bottom_short_circuits(self):
        """Bottom short-circuits like a Left."""

        @do
        def total():
            x = yield Right(1).filter(lambda v: v > 5)
            return x

        assert total() is Bottom

    def test_do_closes_generator(self):
        """The generator is closed on short-circuit."""
        cleaned: list[bool] = []

        @do
        def compute():
            try:
                yield Left('stop')
                yield Right(1)
            finally:
                cleaned.append(True)
            return 0

        compute()
        assert cleaned == [True]

    def test_do_with_arguments(self):
        """Arguments pass through to the generator."""

        @do
        def scaled(factor: int):
            x = yield Right(5)
            return x * factor

        assert scaled(3) == Right(15)


class TestDoTryDecorator:
    """Tests for @do_try with Try."""

    def test_do_try_success(self):
        """Bound values are sent back and the return value succeeds."""

        @do_try
        def compute():
            x = yield Try.success(2)
            y = yield Try(lambda: 3)
            return x * y

        assert compute() == Try.success(6)

    def test_do_try_is_lazy(self):
        """The generator only starts when the Try is inspected."""
        started: list[bool] = []

        @do_try
        def compute():
            started.append(True)
            x = yield Try.success(1)
            return x

        t = compute()
        assert started == []
        assert t.run() == Success(1)
        assert started == [True]

    def test_do_try_failure_keeps_error(self):
        """The first failure fails the whole computation with its error."""
        error = KeyError('missing')
        reached: list[str] = []

        @do_try
        def compute():
            yield Try.failure(error)
            reached.append('after')
            return 1

        assert compute().run().error is error
        assert reached == []

    def test_do_try_stop_iteration_failure_stays_failed(self):
        """A yielded Try that failed with StopIteration fails the computation."""
        inner = Try(lambda: next(iter([])))

        @do_try
        def compute():
            x = yield inner
            return x

        outcome = compute().run()
        assert isinstance(outcome.error, StopIteration)
        assert outcome.error is inner.run().error

    def test_do_try_captures_raise_in_body(self):
        """An exception raised by the generator body is captured."""

        @do_try
        def compute():
            x = yield Try.success(0)
            return 1 // x

        assert isinstance(compute().run().error, ZeroDivisionError)


class TestDecoratorErrors:
    """Decorators do not hide programmer errors."""

    def test_do_none_return_rejected(self):
        """A generator returning None cannot build a Right."""

        @do
        def nothing():
            yield Right(1)

        with pytest.raises(ValueError):
            nothing()
