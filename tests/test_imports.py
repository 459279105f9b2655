"""Tests for verifying import styles work correctly."""


class TestFlatImports:
    """Verify flat imports from optval work."""

    def test_option_types(self) -> None:
        from optval import Absent, AbsentType, OptionalValue, Present, empty, of, of_nullable

        assert of(42).get() == 42
        assert empty() is Absent
        option: OptionalValue[int] = of_nullable(1)
        assert option.is_present()
        assert isinstance(Absent, AbsentType)
        assert isinstance(option, Present)

    def test_errors(self) -> None:
        from optval import AbsentValueError, NullConstructionError, OptvalError

        assert issubclass(AbsentValueError, OptvalError)
        assert issubclass(NullConstructionError, OptvalError)

    def test_support(self) -> None:
        from optval import Record, configure_logging, get_config, get_logger, init, traced

        assert Record('mary', 'mary@gmail.com').get_name() == 'mary'
        assert callable(configure_logging)
        assert callable(get_logger)
        assert callable(init)
        assert callable(get_config)
        assert callable(traced)


class TestSubmoduleImports:
    """Verify submodule imports work."""

    def test_option_module(self) -> None:
        from optval.option import Absent, Present, of_nullable

        assert of_nullable(None) is Absent
        assert of_nullable('mary') == Present('mary')

    def test_errors_module(self) -> None:
        from optval.errors import AbsentValueError

        assert str(AbsentValueError()) == 'No value present'

    def test_trace_module(self) -> None:
        from optval.trace import Traced, traced

        assert isinstance(traced(print), Traced)
