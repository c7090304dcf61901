"""Tests for the decode_raw entry point against the response fixtures."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, List

import pytest

from xmlrpcdecoder import (
    DecodeError,
    Fault,
    FieldCountMismatch,
    InvalidFieldType,
    StdDecoder,
    UnmatchedMemberError,
    decode_raw,
)
from xmlrpcdecoder.values import Boolean, Int, String, Value


@dataclass
class Simple:
    Param: str = ""
    Int: int = 0


@dataclass
class Ints:
    Ints: List[int] = field(default_factory=list)


@dataclass
class MixedAny:
    Mixed: List[Any] = field(default_factory=list)


@dataclass
class MixedValues:
    Mixed: List[Value] = field(default_factory=list)


@dataclass
class BadInts:
    Ints: str = ""


@dataclass
class Inner:
    Foo: str = ""
    Baz: int = 0
    WoBleBobble: bool = False
    WoBleBobble2: int = 0


@dataclass
class Outer:
    Struct: Inner = field(default_factory=Inner)


@dataclass
class BadStruct:
    Struct: str = ""


@dataclass
class PartialInner:
    Foo: str = ""


@dataclass
class PartialOuter:
    Struct: PartialInner = field(default_factory=PartialInner)


@pytest.mark.parametrize(
    "test_file, target, expected",
    [
        ("response_simple.xml", Simple(), Simple(Param="South Dakota", Int=12345)),
        ("response_array.xml", Ints(), Ints(Ints=[10, 11, 12])),
        ("response_array_mixed.xml", MixedAny(), MixedAny(Mixed=[10, "s11", True])),
        (
            "response_array_mixed.xml",
            MixedValues(),
            MixedValues(Mixed=[Int(10), String("s11"), Boolean(True)]),
        ),
        (
            "response_struct.xml",
            Outer(),
            Outer(Struct=Inner(Foo="bar", Baz=2, WoBleBobble=True, WoBleBobble2=34)),
        ),
    ],
    ids=["simple", "array", "array-mixed", "array-mixed-values", "struct"],
)
def test_decode_raw(load_test_file, test_file: str, target, expected) -> None:
    StdDecoder().decode_raw(load_test_file(test_file), target)
    assert target == expected


def test_mixed_array_keeps_native_types(load_test_file) -> None:
    target = MixedAny()
    decode_raw(load_test_file("response_array_mixed.xml"), target)
    assert [type(item) for item in target.Mixed] == [int, str, bool]


@pytest.mark.parametrize(
    "test_file, target, expected",
    [
        ("response_array.xml", BadInts(), InvalidFieldType("slice", "string")),
        ("response_struct.xml", BadStruct(), InvalidFieldType("struct", "string")),
    ],
    ids=["array-bad-param", "struct-bad-param"],
)
def test_decode_raw_invalid_field_type(load_test_file, test_file: str, target, expected) -> None:
    with pytest.raises(InvalidFieldType) as excinfo:
        StdDecoder().decode_raw(load_test_file(test_file), target)
    assert excinfo.value == expected
    assert str(excinfo.value) == str(expected)


def test_decode_raw_fault(load_test_file) -> None:
    target = Ints()
    with pytest.raises(Fault) as excinfo:
        StdDecoder().decode_raw(load_test_file("response_fault.xml"), target)

    fault = excinfo.value
    assert fault == Fault(4, "Too many parameters.")
    assert (fault.code, fault.string) == (4, "Too many parameters.")
    assert not isinstance(fault, DecodeError)
    assert target == Ints()


def test_decode_raw_field_count_mismatch(load_test_file) -> None:
    with pytest.raises(FieldCountMismatch) as excinfo:
        decode_raw(load_test_file("response_simple.xml"), Ints())
    assert (excinfo.value.expected, excinfo.value.actual) == (2, 1)


def test_decode_raw_ignores_members_without_fields(load_test_file) -> None:
    target = PartialOuter()
    decode_raw(load_test_file("response_struct.xml"), target)
    assert target == PartialOuter(Struct=PartialInner(Foo="bar"))


def test_decode_raw_strict_rejects_members_without_fields(load_test_file) -> None:
    with pytest.raises(UnmatchedMemberError) as excinfo:
        StdDecoder(strict=True).decode_raw(load_test_file("response_struct.xml"), PartialOuter())
    assert excinfo.value.member == "baz"


def test_decode_returns_native_params(load_test_file) -> None:
    decoder = StdDecoder()
    assert decoder.decode(load_test_file("response_simple.xml")) == ["South Dakota", 12345]
    assert decoder.decode(load_test_file("response_struct.xml")) == [
        {"foo": "bar", "baz": 2, "woBleBobble": True, "wo_ble_bobble_2": 34}
    ]
    with pytest.raises(Fault):
        decoder.decode(load_test_file("response_fault.xml"))


def test_decoder_is_safe_across_threads(load_test_file) -> None:
    raw = load_test_file("response_struct.xml")
    decoder = StdDecoder()

    def decode(_):
        target = Outer()
        decoder.decode_raw(raw, target)
        return target

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(decode, range(16)))

    expected = Outer(Struct=Inner(Foo="bar", Baz=2, WoBleBobble=True, WoBleBobble2=34))
    assert all(result == expected for result in results)
    assert len({id(result.Struct) for result in results}) == 16


@dataclass(frozen=True)
class FrozenInner:
    x: int = 0


@dataclass
class HoldsFrozen:
    inner: FrozenInner = field(default_factory=FrozenInner)


def test_decode_raw_into_frozen_nested_record() -> None:
    raw = (
        "<methodResponse><params><param><value><struct>"
        "<member><name>x</name><value><int>1</int></value></member>"
        "</struct></value></param></params></methodResponse>"
    )
    target = HoldsFrozen()
    decode_raw(raw, target)
    assert target == HoldsFrozen(inner=FrozenInner(x=1))
