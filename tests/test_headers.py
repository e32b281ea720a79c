"""Tests for missive.http.headers — case-insensitive, case-preserving HeaderCollection."""

from collections.abc import Callable

import pytest

from missive.http.headers import HeaderCollection, as_header_values


class TestHeaderCollection:
    def test_empty(self) -> None:
        h = HeaderCollection()
        assert h.all() == {}
        assert len(h) == 0
        assert list(h) == []

    def test_from_mapping(self) -> None:
        h = HeaderCollection({"Host": ["example.com"], "Accept": "*/*"})
        assert h.all() == {"Host": ["example.com"], "Accept": ["*/*"]}

    def test_from_pairs_merges_case_insensitive_names(self) -> None:
        h = HeaderCollection([("Accept", "text/html"), ("accept", "text/xml")])
        assert h.all() == {"Accept": ["text/html", "text/xml"]}

    def test_has_is_case_insensitive(self) -> None:
        h = HeaderCollection({"Content-Type": "text/html"})
        assert h.has("content-type")
        assert h.has("CONTENT-TYPE")
        assert not h.has("x-missing")

    def test_get_is_case_insensitive(self) -> None:
        h = HeaderCollection({"Content-Type": "text/html"})
        assert h.get("content-type") == ["text/html"]

    def test_get_missing_returns_empty_list(self) -> None:
        assert HeaderCollection().get("X-Missing") == []

    def test_get_returns_a_copy(self) -> None:
        h = HeaderCollection({"Accept": "*/*"})
        h.get("Accept").append("text/html")
        assert h.get("Accept") == ["*/*"]

    def test_set_replaces_values(self) -> None:
        h = HeaderCollection({"Accept": ["a", "b"]})
        h.set("Accept", "c")
        assert h.get("Accept") == ["c"]

    def test_set_keeps_original_casing(self) -> None:
        h = HeaderCollection({"X-Request-Id": "1"})
        h.set("x-request-id", "2")
        assert h.all() == {"X-Request-Id": ["2"]}

    def test_set_adopts_casing_for_new_name(self) -> None:
        h = HeaderCollection()
        h.set("x-Custom", ["a", "b"])
        assert h.all() == {"x-Custom": ["a", "b"]}

    def test_add_appends(self) -> None:
        h = HeaderCollection({"Set-Cookie": "a=1"})
        h.add("set-cookie", ["b=2", "c=3"])
        assert h.all() == {"Set-Cookie": ["a=1", "b=2", "c=3"]}

    def test_add_creates_missing_entry(self) -> None:
        h = HeaderCollection()
        h.add("Accept", "*/*")
        assert h.all() == {"Accept": ["*/*"]}

    def test_remove(self) -> None:
        h = HeaderCollection({"Accept": "*/*", "Host": "example.com"})
        h.remove("ACCEPT")
        assert h.all() == {"Host": ["example.com"]}

    def test_remove_missing_is_noop(self) -> None:
        h = HeaderCollection({"Accept": "*/*"})
        h.remove("X-Missing")
        assert h.all() == {"Accept": ["*/*"]}

    def test_all_returns_copies(self) -> None:
        h = HeaderCollection({"Accept": "*/*"})
        h.all()["Accept"].append("text/html")
        assert h.get("Accept") == ["*/*"]

    def test_from_collection_copies(self) -> None:
        h = HeaderCollection({"Accept": "*/*"})
        clone = HeaderCollection(h)
        clone.add("Accept", "text/html")
        assert h.get("Accept") == ["*/*"]

    def test_copy_is_independent(self) -> None:
        h = HeaderCollection({"Accept": "*/*"})
        clone = h.copy()
        clone.add("Accept", "text/html")
        clone.set("Host", "example.com")
        assert h.all() == {"Accept": ["*/*"]}
        assert clone.all() == {"Accept": ["*/*", "text/html"], "Host": ["example.com"]}

    def test_contains(self) -> None:
        h = HeaderCollection({"Accept": "*/*"})
        assert "accept" in h
        assert "x-missing" not in h
        assert 42 not in h  # type: ignore[operator]

    def test_iter_yields_stored_names(self) -> None:
        h = HeaderCollection([("Accept", "*/*"), ("content-type", "text/html"), ("ACCEPT", "x")])
        assert list(h) == ["Accept", "content-type"]
        assert len(h) == 2

    def test_equality(self) -> None:
        assert HeaderCollection({"A": "1"}) == HeaderCollection({"A": ["1"]})
        assert HeaderCollection({"A": "1"}) != HeaderCollection({"A": "2"})

    def test_repr(self) -> None:
        h = HeaderCollection({"Accept": "*/*"})
        assert repr(h) == "HeaderCollection({'Accept': ['*/*']})"


class TestAsHeaderValues:
    def test_single_string(self) -> None:
        assert as_header_values("a") == ["a"]

    def test_sequence(self) -> None:
        assert as_header_values(("a", "b")) == ["a", "b"]


class TestFreeze:
    def test_freeze_returns_same_collection(self) -> None:
        h = HeaderCollection({"Accept": "*/*"})
        assert h.freeze() is h
        assert h.frozen

    def test_new_collection_is_not_frozen(self) -> None:
        assert not HeaderCollection().frozen

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda h: h.set("Accept", "text/html"),
            lambda h: h.add("Accept", "text/html"),
            lambda h: h.remove("Accept"),
        ],
    )
    def test_frozen_rejects_mutation(self, mutate: Callable[[HeaderCollection], None]) -> None:
        h = HeaderCollection({"Accept": "*/*"}).freeze()
        with pytest.raises(TypeError, match="frozen"):
            mutate(h)
        assert h.all() == {"Accept": ["*/*"]}

    def test_copy_of_frozen_is_mutable(self) -> None:
        h = HeaderCollection({"Accept": "*/*"}).freeze()
        clone = h.copy()
        clone.add("Accept", "text/html")
        assert not clone.frozen
        assert h.get("Accept") == ["*/*"]

    def test_frozen_compares_equal(self) -> None:
        assert HeaderCollection({"A": "1"}).freeze() == HeaderCollection({"A": "1"})
