"""Tests for enforcement bindings and wrapper construction."""

from typing import Any

import pytest

from method_contracts.contracts import ParamKind, ParamSlot, SignatureModel
from method_contracts.contracts.errors import (
    BrokenParamContractError,
    BrokenReturnValueContractError,
    ParameterDoesNotExistError,
)
from method_contracts.core.annotations import AnnotationRecord, ParamContract, ReturnContract
from method_contracts.core.config import ContractSettings
from method_contracts.engine.enforcer import (
    EnforcementBinding,
    enforce,
    get_binding,
    static_owner_name,
)


def record_of(*params: tuple[str, Any], returns: Any = None) -> AnnotationRecord:
    record = AnnotationRecord(params=[ParamContract.declare(name, c) for name, c in params])
    if returns is not None:
        record.set_return(ReturnContract.declare(returns))
    return record


def module_level(x: Any) -> Any:
    return x


class TestEnforce:
    def test_disabled_returns_function_untouched(self) -> None:
        wrapped = enforce(module_level, record_of(("x", int)))
        assert wrapped is module_level

    def test_empty_record_returns_function_untouched(self, contracts_enabled: ContractSettings) -> None:
        assert enforce(module_level, AnnotationRecord()) is module_level
        assert enforce(module_level, None) is module_level

    def test_wrapper_checks_params_and_passes_through(self, contracts_enabled: ContractSettings) -> None:
        wrapped = enforce(module_level, record_of(("x", int)))
        assert wrapped(1) == 1
        with pytest.raises(BrokenParamContractError) as exc_info:
            wrapped("1")
        assert exc_info.value.owner == __name__
        assert exc_info.value.param_name == "x"

    def test_wrapper_checks_return(self, contracts_enabled: ContractSettings) -> None:
        wrapped = enforce(module_level, record_of(returns=str))
        assert wrapped("ok") == "ok"
        with pytest.raises(BrokenReturnValueContractError):
            wrapped(1)

    def test_wrapper_preserves_metadata(self, contracts_enabled: ContractSettings) -> None:
        wrapped = enforce(module_level, record_of(("x", int)))
        assert wrapped.__name__ == "module_level"
        assert wrapped.__wrapped__ is module_level  # type: ignore[attr-defined]

    def test_binding_exposed(self, contracts_enabled: ContractSettings) -> None:
        wrapped = enforce(module_level, record_of(("x", int)))
        binding = get_binding(wrapped)
        assert isinstance(binding, EnforcementBinding)
        assert binding.original is module_level
        assert binding.signature.names == ("x",)
        assert get_binding(module_level) is None

    def test_rewrapping_replaces_binding(self, contracts_enabled: ContractSettings) -> None:
        calls: list[Any] = []

        def spy(x: Any) -> Any:
            calls.append(x)
            return x

        first = enforce(spy, record_of(("x", int)))
        second = enforce(first, record_of(("x", str)))

        assert get_binding(second).original is spy  # type: ignore[union-attr]
        assert second("s") == "s"
        assert calls == ["s"]

    def test_original_called_with_original_arguments(self, contracts_enabled: ContractSettings) -> None:
        received: dict[str, Any] = {}

        def f(a: Any, *rest: Any, k: Any = None, **extra: Any) -> None:
            received.update(a=a, rest=rest, k=k, extra=extra)

        wrapped = enforce(f, record_of(("a", int)))
        wrapped(1, 2, 3, k=4, z=5)
        assert received == {"a": 1, "rest": (2, 3), "k": 4, "extra": {"z": 5}}

    def test_errors_from_body_propagate(self, contracts_enabled: ContractSettings) -> None:
        def boom(x: Any) -> None:
            raise RuntimeError("body failed")

        wrapped = enforce(boom, record_of(("x", int), returns=int))
        with pytest.raises(RuntimeError, match="body failed"):
            wrapped(1)

    def test_to_record_is_independent_copy(self, contracts_enabled: ContractSettings) -> None:
        wrapped = enforce(module_level, record_of(("x", int), returns=int))
        binding = get_binding(wrapped)
        assert binding is not None

        record = binding.to_record()
        assert [p.name for p in record.params] == ["x"]
        assert record.return_contract is binding.return_contract

        record.params.clear()
        assert [p.name for p in binding.params] == ["x"]


class TestValidationSkipping:
    def test_omitted_default_skips_checks(self, contracts_enabled: ContractSettings) -> None:
        def f(a: Any, b: Any = None) -> Any:
            return b

        wrapped = enforce(f, record_of(("a", int), ("b", int)))
        assert wrapped(1) is None
        assert wrapped("not checked") is None
        with pytest.raises(BrokenParamContractError, match=r"f.b was None"):
            wrapped(1, None)

    def test_under_application_raises_natural_type_error(self, contracts_enabled: ContractSettings) -> None:
        def two(a: Any, b: Any) -> Any:
            return a

        wrapped = enforce(two, record_of(("a", int)))
        with pytest.raises(TypeError):
            wrapped("not an int")

    def test_over_application_raises_natural_type_error(self, contracts_enabled: ContractSettings) -> None:
        wrapped = enforce(module_level, record_of(("x", int)))
        with pytest.raises(TypeError):
            wrapped("not an int", "extra")

    def test_unknown_parameter_raised_at_call_time(self, contracts_enabled: ContractSettings) -> None:
        def no_params() -> str:
            return "ok"

        wrapped = enforce(no_params, record_of(("does_not_exist", object)))
        with pytest.raises(ParameterDoesNotExistError, match=r"\.does_not_exist does not exist"):
            wrapped()


class TestHandDeclaredSignature:
    def test_declared_signature_used_for_binding(self, contracts_enabled: ContractSettings) -> None:
        def anything(*args: Any, **kwargs: Any) -> Any:
            return args

        model = SignatureModel.of(ParamSlot("x", ParamKind.POSITIONAL), ParamSlot("y", ParamKind.POSITIONAL))
        wrapped = enforce(anything, record_of(("y", str)), signature=model, name="pair", owner="Api")
        assert wrapped(1, "s") == (1, "s")
        with pytest.raises(BrokenParamContractError, match=r"^Api#pair\.y was 2"):
            wrapped(1, 2)


class TestOwnerNames:
    def test_static_owner_for_methods(self) -> None:
        class Sample:
            def foo(self) -> None:
                return None

        assert static_owner_name(Sample.foo) == "Sample"

    def test_static_owner_for_module_function(self) -> None:
        assert static_owner_name(module_level) == __name__

    def test_self_reports_runtime_class(self, contracts_enabled: ContractSettings) -> None:
        class Base:
            def foo(self, x: Any) -> Any:
                return x

        Base.foo = enforce(Base.foo, record_of(("x", str)))  # type: ignore[method-assign]

        class Child(Base):
            pass

        with pytest.raises(BrokenParamContractError, match=r"^Child#foo\.x"):
            Child().foo(1)
