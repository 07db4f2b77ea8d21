"""Tests for the compile cache."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock, patch

import pytest
from docpointer.lib.cache import CompileCache
from docpointer.lib.exceptions import PointerSyntaxError
from docpointer.lib.tokenizer import tokenize
from docpointer.models.dataModel import UNSET


def test_miss_then_hit():
    cache = CompileCache(maxsize=None)
    assert cache.get_or_tokenize("/a/b", "/", tokenize) == ("a", "b")
    assert cache.get_or_tokenize("/a/b", "/", tokenize) == ("a", "b")
    assert cache.misses == 1
    assert cache.hits == 1
    assert len(cache) == 1


def test_stores_tuples():
    cache = CompileCache(maxsize=None)
    assert isinstance(cache.get_or_tokenize("/a", "/", tokenize), tuple)


def test_keyed_by_pointer_and_delimiter():
    cache = CompileCache(maxsize=None)
    cache.get_or_tokenize("a.b", "/", tokenize)
    cache.get_or_tokenize("a.b", ".", tokenize)
    assert ("a.b", "/") in cache
    assert ("a.b", ".") in cache
    assert len(cache) == 2


def test_full_cache_stops_inserting():
    cache = CompileCache(maxsize=1)
    cache.get_or_tokenize("/a", "/", tokenize)
    assert cache.get_or_tokenize("/b", "/", tokenize) == ("b",)
    assert ("/a", "/") in cache
    assert ("/b", "/") not in cache
    assert len(cache) == 1


def test_full_cache_is_reported_once():
    cache = CompileCache(maxsize=1)
    with patch("docpointer.lib.cache.LOG") as mock_log:
        for pointer in ("/a", "/b", "/c", "/d"):
            cache.get_or_tokenize(pointer, "/", tokenize)
    mock_log.assert_called_once()


def test_zero_disables_caching():
    cache = CompileCache(maxsize=0)
    tokenizer = Mock(return_value=["a"])
    cache.get_or_tokenize("/a", "/", tokenizer)
    cache.get_or_tokenize("/a", "/", tokenizer)
    assert tokenizer.call_count == 2
    assert len(cache) == 0


def test_default_size_from_settings():
    with patch("docpointer.lib.cache.appsettings") as mock_settings:
        mock_settings.cacheSize = 7
        assert CompileCache().maxsize == 7


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        CompileCache(maxsize=-1)


def test_tokenizer_errors_are_not_cached():
    cache = CompileCache(maxsize=None)
    with pytest.raises(PointerSyntaxError):
        cache.get_or_tokenize("/a", "", tokenize)
    assert len(cache) == 0


def test_clear():
    cache = CompileCache(maxsize=None)
    cache.get_or_tokenize("/a", "/", tokenize)
    cache.get_or_tokenize("/a", "/", tokenize)
    cache.clear()
    assert len(cache) == 0
    assert cache.hits == 0
    assert cache.misses == 0


def test_concurrent_readers_share_one_entry():
    cache = CompileCache(maxsize=None)
    pointers = ["/a/b", "/c", "/a/b", "/d/e/f"] * 50

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda p: cache.get_or_tokenize(p, "/", tokenize), pointers))

    assert results == [tuple(tokenize(p)) for p in pointers]
    assert len(cache) == 3
    assert cache.hits + cache.misses == len(pointers)


@pytest.mark.parametrize("pointer", [["a"], {"a": 1}, None])
def test_non_string_pointer_rejected_before_lookup(pointer):
    cache = CompileCache(maxsize=None)
    tokenizer = Mock(return_value=["a"])
    with pytest.raises(PointerSyntaxError, match="must be a string"):
        cache.get_or_tokenize(pointer, "/", tokenizer)
    tokenizer.assert_not_called()
    assert cache.misses == 0
    assert len(cache) == 0


def test_explicit_none_is_unbounded():
    with patch("docpointer.lib.cache.appsettings") as mock_settings:
        mock_settings.cacheSize = 7
        assert CompileCache(maxsize=None).maxsize is None
        assert CompileCache(maxsize=UNSET).maxsize == 7
