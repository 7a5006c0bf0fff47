from collections import namedtuple

import pytest

from continuum import UINT32_MAX, ConversionError, Entry, to_uint32

Server = namedtuple("Server", ["host", "port"])


@pytest.mark.parametrize("number", [0, 1, 2 ** 31, UINT32_MAX])
def test_to_uint32_accepts_range(number):
    assert to_uint32(number) == number


@pytest.mark.parametrize("number", [-1, UINT32_MAX + 1, 2 ** 64])
def test_to_uint32_rejects_out_of_range(number):
    with pytest.raises(ConversionError):
        to_uint32(number)


@pytest.mark.parametrize("number", [1.0, "1", None, True, False])
def test_to_uint32_rejects_non_integral(number):
    with pytest.raises(ConversionError):
        to_uint32(number)


def test_conversion_error_is_value_error():
    with pytest.raises(ValueError):
        to_uint32(-1)


def test_to_uint32_chains_type_error():
    with pytest.raises(ConversionError) as info:
        to_uint32(2.5)
    assert isinstance(info.value.__cause__, TypeError)


def test_entry_repr_with_host_and_port():
    entry = Entry(1234, Server("10.0.0.1", 21201))
    assert repr(entry) == "<1234, 10.0.0.1:21201>"


def test_entry_repr_with_opaque_payload():
    assert repr(Entry(7, "node-a")) == "<7, node-a>"


def test_entry_equality():
    assert Entry(1, "a") == Entry(1, "a")
    assert Entry(1, "a") != Entry(2, "a")
    assert len({Entry(1, "a"), Entry(1, "a")}) == 1
