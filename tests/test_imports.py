"""Tests for verifying import styles work correctly."""


class TestFlatImports:
    """Verify flat imports from tryeither work."""

    def test_try_types(self) -> None:
        """Test importing Try types from root."""
        from tryeither import Failure, Success, Try, tryfun

        assert Try.success(1).run() == Success(1)
        assert isinstance(Try.failure(ValueError()).run(), Failure)
        assert callable(tryfun)

    def test_either_types(self) -> None:
        """Test importing Either types from root."""
        from tryeither import Bottom, BottomType, Left, Right, lefts, match_all, partition, rights

        assert Right(1).is_right()
        assert Left('e').is_left()
        assert isinstance(Bottom, BottomType)
        assert all(callable(f) for f in (lefts, rights, partition, match_all))

    def test_decorators(self) -> None:
        """Test importing decorators from root."""
        from tryeither import do, do_try, trying

        assert callable(do)
        assert callable(do_try)
        assert callable(trying)

    def test_typeclass(self) -> None:
        """Test importing strategies and protocols from root."""
        from tryeither import Addition, TInt, TNum, typeclass

        assert isinstance(TInt, Addition)
        assert TNum.add(1, 2) == 3
        assert callable(typeclass)

    def test_errors(self) -> None:
        """Test importing errors from root."""
        from tryeither import BottomError, FilterRejectedError, NullPayloadError, TryEitherError, UnsupportedStateError

        for error in (BottomError, FilterRejectedError, NullPayloadError, UnsupportedStateError):
            assert issubclass(error, TryEitherError)

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is importable."""
        import tryeither

        for name in tryeither.__all__:
            assert hasattr(tryeither, name), name


class TestSubmoduleImports:
    """Verify submodule imports work."""

    def test_submodules(self) -> None:
        """Test importing from submodules."""
        from tryeither import prelude as P
        from tryeither.decorators import trying
        from tryeither.either import Right
        from tryeither.try_ import Try
        from tryeither.typeclass import TLst

        assert P.add(TLst, Right([1]), Right([2])) == Right([1, 2])
        assert trying(lambda: 1)().unwrap() == 1
        assert Try.success(1).is_succ()
