"""Tests des appels amont paralleles (principal / secondaire)."""

import pytest

from vyla.core.errors import NotFoundError, UpstreamError
from vyla.services.fanout import gather_settled, or_default, require_primary


async def _ok(value):
    return value


async def _fail(error):
    raise error


class TestGatherSettled:
    @pytest.mark.asyncio
    async def test_keeps_order_and_returns_upstream_errors(self):
        error = UpstreamError("down", upstream_status=503)

        results = await gather_settled(_ok({"a": 1}), _fail(error), _ok({"c": 3}), labels=("a", "b", "c"))

        assert results == [{"a": 1}, error, {"c": 3}]

    @pytest.mark.asyncio
    async def test_other_exceptions_propagate(self):
        with pytest.raises(KeyError):
            await gather_settled(_ok({}), _fail(KeyError("bug")))


class TestOrDefault:
    def test_success_value(self):
        assert or_default({"results": [1]}, {"results": []}) == {"results": [1]}

    def test_failure_gives_default(self):
        assert or_default(UpstreamError("x"), {"results": []}) == {"results": []}


class TestRequirePrimary:
    def test_returns_payload(self):
        assert require_primary({"id": 603}, "Movie", 603) == {"id": 603}

    def test_upstream_404_becomes_not_found(self):
        with pytest.raises(NotFoundError, match="Movie not found: 603"):
            require_primary(UpstreamError("nope", upstream_status=404), "Movie", 603)

    def test_payload_without_id_is_not_found(self):
        with pytest.raises(NotFoundError):
            require_primary({"success": False}, "Person", 1)

    def test_other_upstream_errors_reraised(self):
        error = UpstreamError("Invalid API key", upstream_status=401)
        with pytest.raises(UpstreamError) as exc_info:
            require_primary(error, "Movie", 603)
        assert exc_info.value is error
