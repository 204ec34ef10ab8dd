"""End-to-end tests for accessors declared in class bodies."""

# ruff: noqa: F821 - declaration helpers are provided by the class namespace

import functools

import pytest

from method_contracts import Contracted
from method_contracts.contracts.errors import BrokenParamContractError, BrokenReturnValueContractError
from method_contracts.core.config import ContractSettings


def build_helper_class() -> type:
    class HelperClass(Contracted):
        param("value", object)
        attr_writer("single_writer")

        param("value", object)
        attr_writer("writer_1", "writer_2", "writer_3")

        param("value", object)
        attr_accessor("single_accessor")

        param("value", object)
        attr_accessor("accessor_1", "accessor_2", "accessor_3")

        returns_an(object)
        attr_reader("single_reader")

        returns_an(object)
        attr_reader("reader_1", "reader_2", "reader_3")

    return HelperClass


WRITERS = ["single_writer", "writer_1", "writer_2", "writer_3"]
READERS = ["single_reader", "reader_1", "reader_2", "reader_3"]
ACCESSORS = ["single_accessor", "accessor_1", "accessor_2", "accessor_3"]


class TestGeneratedAccessors:
    @pytest.mark.parametrize("enabled", [True, False])
    def test_generates_properties(self, enabled: bool, contracts_enabled: ContractSettings) -> None:
        contracts_enabled.enabled = enabled
        helper_class = build_helper_class()

        for name in WRITERS:
            prop = vars(helper_class)[name]
            assert prop.fset is not None and prop.fget is None
        for name in READERS:
            prop = vars(helper_class)[name]
            assert prop.fget is not None and prop.fset is None
        for name in ACCESSORS:
            prop = vars(helper_class)[name]
            assert prop.fget is not None and prop.fset is not None

    def test_accessor_round_trip(self, contracts_enabled: ContractSettings) -> None:
        instance = build_helper_class()()
        assert instance.accessor_2 is None
        instance.accessor_2 = "value"
        assert instance.accessor_2 == "value"
        assert instance.reader_3 is None

    def test_write_only_property_cannot_be_read(self, contracts_enabled: ContractSettings) -> None:
        instance = build_helper_class()()
        instance.writer_1 = 1
        with pytest.raises(AttributeError):
            instance.writer_1  # noqa: B018


class TestAccessorContracts:
    def test_attr_writer(self, contracts_enabled: ContractSettings) -> None:
        class WithAttrWriter(Contracted):
            param("value", str)
            attr_writer("attr_writer_property")

        o = WithAttrWriter()
        o.attr_writer_property = "a string"
        assert vars(o)["attr_writer_property"] == "a string"

        with pytest.raises(BrokenParamContractError) as exc_info:
            o.attr_writer_property = 1
        assert str(exc_info.value) == (
            "WithAttrWriter#attr_writer_property.value was 1, which does not match: be a str"
        )

    def test_attr_accessor(self, contracts_enabled: ContractSettings) -> None:
        class WithAttrAccessor(Contracted):
            param("value", str)
            attr_accessor("attr_accessor_property")

        o = WithAttrAccessor()
        assert o.attr_accessor_property is None
        o.attr_accessor_property = "a string"
        assert o.attr_accessor_property == "a string"

        with pytest.raises(BrokenParamContractError, match=r"^WithAttrAccessor#attr_accessor_property\.value"):
            o.attr_accessor_property = 1

    def test_annotation_does_not_leak_to_next_method(self, contracts_enabled: ContractSettings) -> None:
        class Sample(Contracted):
            param("value", str)
            attr_accessor("name")

            def after(self, value):
                return value

        assert Sample().after(1) == 1


class TestHandWrittenProperties:
    def test_return_contract_binds_to_property(self, contracts_enabled: ContractSettings) -> None:
        class Sample(Contracted):
            returns(int)
            @property
            def size(self):
                return 3

            def name(self):
                return "n"

        assert Sample().size == 3
        assert Sample().name() == "n"
        assert Sample.annotations("size").return_contract is not None
        assert "name" not in Sample.annotations()

    def test_getter_and_setter_contracts(self, contracts_enabled: ContractSettings) -> None:
        class Sample(Contracted):
            def __init__(self):
                self._size = 0

            returns(int)
            @property
            def size(self):
                return self._size

            param("value", int)
            @size.setter
            def size(self, value):
                self._size = value

        s = Sample()
        s.size = 3
        assert s.size == 3

        with pytest.raises(BrokenParamContractError) as exc_info:
            s.size = "x"
        assert str(exc_info.value) == "Sample#size.value was 'x', which does not match: be a int"

        s._size = "bad"
        with pytest.raises(BrokenReturnValueContractError, match=r"^Sample#size returned 'bad'"):
            s.size  # noqa: B018

        assert [p.name for p in Sample.annotations("size=").params] == ["value"]

    def test_other_descriptors_discard_pending_contracts(self, contracts_enabled: ContractSettings) -> None:
        class Sample(Contracted):
            returns(int)
            @functools.cached_property
            def cached(self):
                return "text"

            def name(self):
                return "n"

        assert Sample().cached == "text"
        assert Sample().name() == "n"
        assert Sample.annotations() == {}

    def test_property_left_alone_when_nothing_pending(self, contracts_enabled: ContractSettings) -> None:
        class Sample(Contracted):
            @property
            def plain(self):
                return "anything"

        assert Sample().plain == "anything"
        assert Sample.annotations() == {}
