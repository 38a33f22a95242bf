"""Correlation id handling on every response."""
import re

import pytest

from mentorship_admin.middleware.logging import CORRELATION_HEADER

GENERATED_ID = re.compile(r"[0-9a-f]{12}")


def test_well_formed_correlation_id_is_echoed(client):
    response = client.get("/health", headers={CORRELATION_HEADER: "req-42-ABC"})
    assert response.headers[CORRELATION_HEADER] == "req-42-ABC"


def test_correlation_id_generated_when_absent(client):
    response = client.get("/health")
    assert GENERATED_ID.fullmatch(response.headers[CORRELATION_HEADER])


@pytest.mark.parametrize("incoming", ["bad id<script>", "a" * 65, "evil;rm", "id.spoof"])
def test_malformed_correlation_id_is_replaced(client, incoming):
    response = client.get("/health", headers={CORRELATION_HEADER: incoming})
    echoed = response.headers[CORRELATION_HEADER]
    assert echoed != incoming
    assert GENERATED_ID.fullmatch(echoed)


def test_error_envelope_carries_sanitised_correlation_id(client):
    response = client.get("/applications/77", headers={CORRELATION_HEADER: "x" * 200})
    assert response.status_code == 404
    body = response.json()
    assert body["correlation_id"] == response.headers[CORRELATION_HEADER]
    assert GENERATED_ID.fullmatch(body["correlation_id"])
