"""Integration tests for tokenizing, caching and resolving together."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest
from docpointer import (
    CompileCache,
    Factory,
    MISSING,
    MissingReferenceError,
    escape,
    evaluate,
    evaluate_token,
)


@pytest.fixture
def document():
    return {
        "users": [
            {"name": "ada", "tags": {"a/b": "slash", "m~n": "tilde"}},
            {"name": "bob", "tags": {}},
        ],
        "": {"": "empty of empty"},
        "settings": {"depth": {"limit": 0}},
    }


def test_escaped_keys_from_escape(document):
    pointer = "/users/0/tags/" + escape("a/b")
    assert evaluate(pointer, document) == "slash"
    pointer = "/users/0/tags/" + escape("m~n")
    assert evaluate(pointer, document) == "tilde"


def test_delimiter_only_pointer_with_custom_delimiter(document):
    DotPointer = Factory(delimiter=".")
    assert DotPointer.evaluate(".", document) == {"": "empty of empty"}
    assert DotPointer.evaluate("settings.depth.limit", document) == 0


def test_empty_token_keeps_current_node(document):
    # a doubled delimiter yields an empty token, which does not move
    assert evaluate("/settings//depth", document) == {"limit": 0}


def test_lenient_factory_with_default(document):
    Lenient = Factory(strict=False, defaultValue="n/a")
    assert Lenient.evaluate("/users/1/name", document) == "bob"
    assert Lenient.evaluate("/users/2/name", document) == "n/a"
    assert Lenient.evaluate("/users/one/name", document) == "n/a"
    assert Lenient.evaluate("/users/1/name/first", document) == "n/a"


def test_strict_error_reports_where_it_stopped(document):
    with pytest.raises(MissingReferenceError) as excinfo:
        evaluate("/users/1/tags/a~1b", document)
    assert excinfo.value.token == "a/b"
    assert excinfo.value.location == "/users/1/tags"


def test_wrapping_the_builtin_evaluator(document):
    def case_insensitive(token, config, node):
        if isinstance(node, dict) and token not in node:
            for key in node:
                if key.lower() == token.lower():
                    return node[key]
            return MISSING
        return evaluate_token(token, config, node)

    Loose = Factory(evaluateToken=case_insensitive)
    assert Loose.evaluate("/USERS/0/NAME", document) == "ada"
    with pytest.raises(MissingReferenceError):
        Loose.evaluate("/USERS/0/AGE", document)


def test_shared_cache_between_resolvers(document):
    cache = CompileCache(maxsize=None)
    strict = Factory(cache=cache)
    lenient = Factory({"strict": False}, cache=cache)
    strict.evaluate("/users/0/name", document)
    assert lenient.evaluate("/users/0/name", document) == "ada"
    assert cache.hits == 1
    assert cache.misses == 1


def test_concurrent_evaluation(document):
    resolver = Factory(cache=CompileCache(maxsize=None))
    pointers = ["/users/0/name", "/users/1/name", "/settings/depth/limit"] * 100
    expected = ["ada", "bob", 0] * 100

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda p: resolver.evaluate(p, document), pointers))

    assert results == expected
    assert len(resolver.cache) == 3


def test_document_is_not_mutated(document):
    snapshot = repr(document)
    Lenient = Factory(strict=False)
    for pointer in ("", "/", "/users/-1", "/users/0/tags/x", "/settings//depth"):
        Lenient.evaluate(pointer, document)
    assert repr(document) == snapshot


def test_token_limit_through_public_api(document):
    with patch("docpointer.lib.resolver.base.appsettings") as mock_settings:
        mock_settings.maxTokens = 1
        with pytest.raises(ValueError):
            evaluate("/users/0", document)
