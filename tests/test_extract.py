import pytest
from app.normalizers import coerce_id, extract_string, looks_like_code


def test_extract_plain_values():
    assert extract_string(None) is None
    assert extract_string("  Jane Doe ") == "Jane Doe"
    assert extract_string("   ") is None
    assert extract_string(42) == "42"
    assert extract_string(3.0) == "3"
    assert extract_string(2.5) == "2.5"
    assert extract_string(True) is None

def test_extract_person_object_uses_subkey_priority():
    assert extract_string({"Email": "j@x.com", "Title": "Jane Doe"}) == "Jane Doe"
    assert extract_string({"Label": " HR ", "Email": "j@x.com"}) == "HR"
    assert extract_string({"Title": "  ", "Name": "Jane"}) == "Jane"
    assert extract_string({"Id": 4}) is None

def test_extract_array_takes_first_element():
    assert extract_string([{"Title": "Jane Doe"}, {"Title": "John"}]) == "Jane Doe"
    assert extract_string([]) is None
    assert extract_string([None, "x"]) is None

def test_extract_unknown_type_is_absent():
    assert extract_string(object()) is None


@pytest.mark.parametrize("value", ["EMP001", "AB1234", "emp01", "E-12", "e_7", "12345", "123"])
def test_looks_like_code(value):
    assert looks_like_code(value)

@pytest.mark.parametrize("value", ["Jane Doe", "A1", "12", "1234567", "ABCDE123", "E-", None, ""])
def test_not_a_code(value):
    assert not looks_like_code(value)


def test_coerce_id_variants():
    assert coerce_id({"Id": 7}) == 7
    assert coerce_id({"ID": "12"}) == 12
    assert coerce_id({"id": 5.0}) == 5
    assert coerce_id({"Id": None, "ID": 9}) == 9
    assert coerce_id({"Id": "abc"}) == 0
    assert coerce_id({}) == 0


def test_non_ascii_digits_are_not_codes():
    assert not looks_like_code("١٢٣")  # Arabic-Indic 123
    assert not looks_like_code("EMP٠٠١")
    assert not looks_like_code("E-१")  # Devanagari 1
