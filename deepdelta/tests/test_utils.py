# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import datetime
import io
import re
from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction

import pytest

from deepdelta.change_format import Missing
from deepdelta.diffing.config import DiffConfig, prefilter_from_paths
from deepdelta.utils import (
    EXPLICIT_MISSING_FILE, real_type_of, is_nan, regexp_source,
    order_independent_hash, _hash_string, read_json,
    split_path, join_path, star_path)


class Custom:
    pass


@pytest.mark.parametrize("value, tag", [
    (Missing, "undefined"),
    (None, "null"),
    (True, "boolean"),
    (False, "boolean"),
    (0, "number"),
    (1.5, "number"),
    (float("nan"), "number"),
    (Decimal("1.1"), "number"),
    (Fraction(1, 3), "number"),
    ("", "string"),
    ("text", "string"),
    (datetime.date(2020, 1, 1), "date"),
    (datetime.datetime(2020, 1, 1, 1, 1), "date"),
    (re.compile("a"), "regexp"),
    ([], "array"),
    ([1, [2]], "array"),
    ({}, "object"),
    (OrderedDict(a=1), "object"),
    (len, "function"),
    (lambda x: x, "function"),
    ((1, 2), "tuple"),
    ({1}, "set"),
    (b"x", "bytes"),
    (Custom(), "custom"),
])
def test_real_type_of(value, tag):
    assert real_type_of(value) == tag


def test_is_nan():
    assert is_nan(float("nan"))
    assert is_nan(Decimal("NaN"))
    assert not is_nan(1.0)
    assert not is_nan("nan")
    assert not is_nan(None)


def test_regexp_source():
    assert regexp_source(re.compile("a+b")) == "/a+b/"
    assert regexp_source(re.compile("a+b", re.IGNORECASE | re.MULTILINE)) == "/a+b/im"
    assert regexp_source(re.compile("x", re.DOTALL | re.VERBOSE)) == "/x/sx"
    assert regexp_source(re.compile(b"ab")) == "/ab/"


def test_hash_string():
    assert _hash_string("") == 0
    assert _hash_string("a") == 97
    assert _hash_string("ab") == 97 * 31 + 98 == 3105
    h = _hash_string("a considerably longer string overflowing 32 bits")
    assert -2**31 <= h < 2**31


def test_order_independent_hash_ignores_array_order():
    assert order_independent_hash([1, 2, 3]) == order_independent_hash([3, 1, 2])
    assert order_independent_hash([[1, 2], {"a": [3, 4]}]) == \
        order_independent_hash([{"a": [4, 3]}, [2, 1]])
    assert order_independent_hash({"a": 1, "b": 2}) == order_independent_hash({"b": 2, "a": 1})


def test_order_independent_hash_distinguishes_values():
    assert order_independent_hash([1, 2]) != order_independent_hash([1, 3])
    assert order_independent_hash({"a": 1}) != order_independent_hash({"b": 1})
    assert order_independent_hash("1") != order_independent_hash(1)
    assert order_independent_hash(None) != order_independent_hash(False)
    assert order_independent_hash([]) != order_independent_hash({})


def test_order_independent_hash_scalars():
    assert order_independent_hash(1) == order_independent_hash(1.0)
    assert order_independent_hash(True) == _hash_string("[ type: boolean ; value: true]")
    assert order_independent_hash(None) == _hash_string("[ type: null ; value: null]")
    assert order_independent_hash("x") == _hash_string("[ type: string ; value: x]")
    assert order_independent_hash(float("nan")) == _hash_string("[ type: number ; value: NaN]")
    assert order_independent_hash({}) == 0
    assert order_independent_hash([]) == _hash_string("[type: array, hash: 0]")


def test_path_helpers():
    assert split_path("/a/b/0") == ["a", "b", "0"]
    assert split_path("/") == []
    assert join_path(["a", 0, "b"]) == "/a/0/b"
    assert join_path([]) == "/"
    assert join_path("a", "b") == "/a/b"
    assert star_path(["a", 3, "b", "12"]) == "/a/*/b/*"


def test_prefilter_from_paths():
    prefilter = prefilter_from_paths(["/meta", "/items/*/id", "/grid/0"])
    assert prefilter([], "meta")
    assert not prefilter([], "items")
    assert prefilter(["items", 4], "id")
    assert not prefilter(["items", 4], "name")
    assert prefilter(["grid"], 7)


def test_diff_config():
    config = DiffConfig()
    assert not config.order_independent
    assert not config.should_skip(["a"], "b")
    config = DiffConfig(prefilter=lambda path, key: path == ["a"], order_independent=1)
    assert config.order_independent is True
    assert config.should_skip(["a"], "b")
    assert not config.should_skip([], "a")
    assert "order_independent=True" in repr(config)
    with pytest.raises(TypeError):
        DiffConfig(None)


def test_read_json(tmpdir):
    assert read_json(EXPLICIT_MISSING_FILE) == {}
    assert read_json(EXPLICIT_MISSING_FILE, on_null="none") is None
    with pytest.raises(ValueError):
        read_json(EXPLICIT_MISSING_FILE, on_null="other")

    fn = tmpdir.join("doc.json")
    fn.write_text(u'{"a": [1, "æ"]}', encoding="utf-8")
    assert read_json(str(fn)) == {"a": [1, u"æ"]}
    assert read_json(io.StringIO(u'[null]')) == [None]
