"""Tests for missive.http.response — status codes and reason phrases."""

import pytest

from missive.errors import InvalidStatusCode
from missive.http.headers import HeaderCollection
from missive.http.response import Response
from missive.http.status import ResponseStatus
from missive.http.streams import StringStream


def _response(**overrides: object) -> Response:
    parts: dict[str, object] = {
        "status_code": 200,
        "headers": HeaderCollection(),
        "body": StringStream(),
    }
    parts.update(overrides)
    return Response(**parts)  # type: ignore[arg-type]


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.status_code == 200
        assert r.reason_phrase == "OK"
        assert r.protocol_version == "1.1"
        assert r.body is None

    def test_status_code(self) -> None:
        assert _response(status_code=201).status_code == 201

    def test_explicit_reason_phrase(self) -> None:
        assert _response(phrase="Fine").reason_phrase == "Fine"

    def test_standard_reason_phrase(self) -> None:
        assert _response(status_code=404).reason_phrase == "Not Found"

    def test_unknown_code_has_empty_phrase(self) -> None:
        assert _response(status_code=299).reason_phrase == ""

    def test_enum_status(self) -> None:
        r = _response(status_code=ResponseStatus.IM_A_TEAPOT)
        assert r.status_code == 418
        assert r.reason_phrase == "I'm a teapot"

    @pytest.mark.parametrize("code", [0, 99, 600, 1000, -200])
    def test_invalid_status_code(self, code: int) -> None:
        with pytest.raises(InvalidStatusCode):
            _response(status_code=code)

    def test_non_int_status_code(self) -> None:
        with pytest.raises(TypeError):
            _response(status_code="200")

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            _response().status_code = 500  # type: ignore[misc]


class TestWithStatus:
    def test_sets_status(self) -> None:
        r = _response().with_status(404)
        assert r.status_code == 404
        assert r.reason_phrase == "Not Found"

    def test_does_not_mutate(self) -> None:
        r = _response()
        r.with_status(404)
        assert r.status_code == 200

    def test_same_instance_for_same_status(self) -> None:
        r = _response()
        assert r.with_status(200) is r
        phrased = _response(phrase="Fine")
        assert phrased.with_status(200, "Fine") is phrased

    def test_accepts_reason_phrase(self) -> None:
        r = _response().with_status(404, "Gone Fishing")
        assert r.reason_phrase == "Gone Fishing"

    def test_omitted_phrase_discards_previous_phrase(self) -> None:
        r = _response(phrase="Fine").with_status(404)
        assert r.reason_phrase == "Not Found"

    def test_omitted_phrase_on_same_code_resets_to_standard(self) -> None:
        phrased = _response(phrase="Fine")
        r = phrased.with_status(200)
        assert r is not phrased
        assert r.reason_phrase == "OK"

    def test_empty_phrase_is_kept(self) -> None:
        r = _response().with_status(404, "")
        assert r.reason_phrase == ""

    def test_rejects_invalid_code(self) -> None:
        with pytest.raises(InvalidStatusCode):
            _response().with_status(700)

    def test_keeps_headers_and_body(self) -> None:
        r = _response().with_header("X-Trace", "1")
        changed = r.with_status(500)
        assert changed.headers is r.headers
        assert changed.body is r.body

    def test_caller_collection_changes_do_not_leak_in(self) -> None:
        headers = HeaderCollection({"X-Trace": "1"})
        r = _response(headers=headers)
        changed = r.with_status(404)
        headers.set("X-Trace", "2")
        assert r.header_line("X-Trace") == "1"
        assert changed.header_line("X-Trace") == "1"


class TestInheritedTransformations:
    def test_with_protocol_version(self) -> None:
        r = _response(status_code=201, phrase="Made")
        changed = r.with_protocol_version("2")
        assert isinstance(changed, Response)
        assert changed.protocol_version == "2"
        assert changed.status_code == 201
        assert changed.reason_phrase == "Made"

    def test_same_instance_for_same_protocol_version(self) -> None:
        r = _response()
        assert r.with_protocol_version("1.1") is r
