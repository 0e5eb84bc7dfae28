import pytest

from arkscript.builtins.strings import chr_, find_substr, format_, ord_, remove_at_str
from arkscript.common import ArkError, ArkTypeError


def test_format_example():
    result = format_(["Hello %%, my name is %%", "world", "ArkScript"])
    assert result == "Hello world, my name is ArkScript"


def test_format_leaves_extra_placeholders():
    assert format_(["Test %% with %%", "1"]) == "Test 1 with %%"


def test_format_ignores_extra_values():
    assert format_(["no placeholder", "x", "y"]) == "no placeholder"


def test_format_constants():
    assert format_(["%% %% %%", None, True, False]) == "nil true false"


def test_format_value_containing_placeholder_is_not_reused():
    assert format_(["%% and %%", "%%", "b"]) == "%% and b"


def test_format_needs_two_arguments():
    with pytest.raises(ArkTypeError):
        format_(["only format"])
    with pytest.raises(ArkTypeError):
        format_([1, 2])


def test_find_examples():
    assert find_substr(["hello world", "hello"]) == 0
    assert find_substr(["hello world", "aworld"]) == -1


def test_find_type_error():
    with pytest.raises(ArkTypeError):
        find_substr(["hello", 1])


def test_remove_at_example():
    assert remove_at_str(["hello world", 0]) == "ello world"


def test_remove_at_shortens_by_one():
    text = "hello world"
    for idx in (0, 5, len(text) - 1):
        result = remove_at_str([text, idx])
        assert len(result) == len(text) - 1
        assert result == text[:idx] + text[idx + 1:]


def test_remove_at_out_of_range():
    with pytest.raises(ArkError, match="index out of range"):
        remove_at_str(["hello world", -1])
    with pytest.raises(ArkError, match="index out of range"):
        remove_at_str(["abc", 3])


def test_ord_examples():
    assert ord_(["h"]) == 104
    assert ord_(["Ô"]) == 212


def test_chr_examples():
    assert chr_([104]) == "h"
    assert chr_([212]) == "Ô"


def test_chr_ord_round_trip():
    for text in ("a", "é", "€", "😀"):
        assert chr_([ord_([text])]) == text


def test_chr_zero_and_invalid_are_empty():
    assert chr_([0]) == ""
    assert chr_([0x110000]) == ""


def test_chr_type_error():
    with pytest.raises(ArkTypeError):
        chr_(["a"])