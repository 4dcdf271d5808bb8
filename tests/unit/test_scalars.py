import pytest
import json_pretty as jp

def test_literals():
    doc = jp.parse('{"t": true, "f": false, "n": null}')
    assert doc == {"t": True, "f": False, "n": None}
    assert doc["t"] is True and doc["f"] is False

def test_literal_before_closing_brace():
    assert jp.parse('{"a": null}') == {"a": None}

@pytest.mark.parametrize("text", [
    '{"a": tru}',
    '{"a": nul}',
    '{"a": fals}',
    '{"a": nulll}',
    '{"a": truex}',
    '{"a": True}',
    '{"a": n ull}',
    '{"a": t}',
])
def test_partial_or_malformed_literals_rejected(text):
    with pytest.raises(jp.GrammarError):
        jp.parse(text)

def test_malformed_literal_reason():
    with pytest.raises(jp.GrammarError) as ei:
        jp.parse('{"a": tru}')
    assert "malformed literal" in ei.value.reason
    assert ei.value.position == 6

def test_negative_number():
    assert jp.parse('{"a": -42}') == {"a": -42}

def test_int32_bounds_accepted():
    doc = jp.parse('{"hi": 2147483647, "lo": -2147483648}')
    assert doc == {"hi": jp.INT32_MAX, "lo": jp.INT32_MIN}

@pytest.mark.parametrize("number", ["99999999999999", "2147483648", "-2147483649"])
def test_out_of_range_numbers_rejected(number):
    with pytest.raises(jp.GrammarError) as ei:
        jp.parse('{"a": %s}' % number)
    assert "out of 32-bit range" in ei.value.reason

def test_leading_zeros_accepted():
    assert jp.parse('{"a": 007}') == {"a": 7}

def test_lone_minus_rejected():
    with pytest.raises(jp.GrammarError) as ei:
        jp.parse('{"a": -}')
    assert "malformed number" in ei.value.reason

@pytest.mark.parametrize("text", ['{"a": 1.5}', '{"a": 1e3}', '{"a": +1}', '{"a": 1 2}'])
def test_only_integers_supported(text):
    with pytest.raises(jp.GrammarError):
        jp.parse(text)
