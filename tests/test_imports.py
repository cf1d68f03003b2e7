"""Tests for the public import surface."""

import klaw_fx


class TestFlatImports:
    """Everything listed in __all__ is importable from the top-level package."""

    def test_all_names_resolve(self):
        for name in klaw_fx.__all__:
            assert hasattr(klaw_fx, name), name

    def test_all_is_sorted(self):
        assert list(klaw_fx.__all__) == sorted(klaw_fx.__all__)

    def test_core_types(self):
        from klaw_fx import Either, Left, Nothing, NothingType, Option, Right, Some

        assert isinstance(Nothing, NothingType)
        assert Option is not None
        assert Either is not None
        assert Left is not Right
        assert Some is not NothingType


class TestSubmoduleImports:
    """Submodules expose the same objects as the flat namespace."""

    def test_option_module(self):
        from klaw_fx.option import Nothing, Some

        assert Some is klaw_fx.Some
        assert Nothing is klaw_fx.Nothing

    def test_either_module(self):
        from klaw_fx.either import Left, Right

        assert Left is klaw_fx.Left
        assert Right is klaw_fx.Right

    def test_decorators_module(self):
        from klaw_fx.decorators import do_either, do_option, safe

        assert safe is klaw_fx.safe
        assert do_option is klaw_fx.do_option
        assert do_either is klaw_fx.do_either

    def test_errors_share_base(self):
        from klaw_fx.errors import FxError

        for name in (
            'AccessError',
            'EitherAccessError',
            'InvalidConstructionError',
            'InvalidOperationError',
            'InvalidRangeError',
            'ValueAccessError',
        ):
            assert issubclass(getattr(klaw_fx, name), FxError)
