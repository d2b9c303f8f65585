import pytest

from multistaking.dec import Dec


def test_string_form():
    assert str(Dec.one()) == "1.000000000000000000"
    assert str(Dec.from_str("-0.5")) == "-0.500000000000000000"


@pytest.mark.parametrize("text", ["0", "1", "0.3", "1.23", "-7.000000000000000001", "123456.789"])
def test_parse_format_round_trip(text):
    value = Dec.from_str(text)
    assert Dec.from_str(str(value)) == value


def test_trailing_zeros_do_not_matter():
    assert Dec.from_str("1.23") == Dec.from_str("1.2300")
    assert Dec.from_int(2) == Dec.from_str("2")
    assert Dec.from_str("1") == Dec.one()


@pytest.mark.parametrize("text", ["", "-", "1.", ".5", "1.2.3", "abc", "1e5", "+1", "0.1234567890123456789"])
def test_invalid_strings(text):
    with pytest.raises(ValueError):
        Dec.from_str(text)


def test_add_sub_inverse():
    a = Dec.from_str("12.345")
    b = Dec.from_str("0.000000000000000007")
    assert a.add(b).sub(b) == a
    assert (a + b) - a == b


def test_mul_int_and_truncate_from_source_example():
    assert Dec.from_str("0.3").mul_int(3001).truncate_int() == 900
    assert Dec.from_str("0.2").mul_int(604).truncate_int() == 120


def test_truncate_toward_zero():
    assert Dec.from_str("-1.5").truncate_int() == -1
    assert Dec.from_str("1.999").truncate_int() == 1


def test_quo_int_inverse_of_mul_int():
    value = Dec.from_str("4.25")
    assert value.mul_int(8).quo_int(8) == value


def test_quo_int_truncates_toward_zero():
    smallest = Dec.from_str("-0.000000000000000001")
    assert smallest.quo_int(2) == Dec.zero()


def test_quo_properties():
    value = Dec.from_str("3.7")
    assert value.quo(value) == Dec.one()
    assert Dec.from_int(6).quo(Dec.from_int(3)) == Dec.from_int(2)
    assert str(Dec.one().quo(Dec.from_int(3))) == "0.333333333333333333"


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Dec.one().quo(Dec.zero())
    with pytest.raises(ZeroDivisionError):
        Dec.one().quo_int(0)


def test_sign_predicates():
    assert Dec.one().is_positive() is True
    assert Dec.zero().is_zero() is True
    assert Dec.zero().is_positive() is False
    assert Dec.from_str("-1").is_negative() is True
    assert Dec.from_str("-1").is_positive() is False


def test_ordering():
    assert Dec.from_str("0.25") < Dec.from_str("0.3") < Dec.one()


def test_overflow():
    with pytest.raises(OverflowError):
        Dec.from_int(2**300)
    with pytest.raises(OverflowError):
        Dec.from_int(2**200).mul_int(2**100)