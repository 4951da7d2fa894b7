"""Sample program flow with a scripted transport."""

import json

from form3 import sample
from form3.client import Form3Client
from tests.fakes import ScriptedTransport, build_response


def _account_body(account_id: str, version: int = 0) -> str:
    return json.dumps({
        "data": {
            "type": "accounts",
            "id": account_id,
            "organisation_id": sample.ORGANISATION_ID,
            "version": version,
            "attributes": {"country": "PL", "name": ["John Smith"]},
        },
        "links": {"self": f"/v1/organisation/accounts/{account_id}"},
    })


def test_sample_round_trip(monkeypatch) -> None:
    transport = ScriptedTransport(
        build_response(201, _account_body("a1")),
        build_response(200, _account_body("a1")),
        build_response(204),
    )
    monkeypatch.setattr(sample, "get_form3_client", lambda: _client(transport))

    assert sample.main() == 0
    assert [c["method"] for c in transport.calls] == ["POST", "GET", "DELETE"]
    assert transport.calls[2]["params"] == {"version": 0}


def test_sample_reports_failure(monkeypatch) -> None:
    transport = ScriptedTransport(build_response(500))
    monkeypatch.setattr(sample, "get_form3_client", lambda: _client(transport))

    assert sample.main() == 1
    assert len(transport.calls) == 1


def _client(transport: ScriptedTransport) -> Form3Client:
    return Form3Client(base_url="http://form3/v1/", http_client=transport)


def test_sample_deletes_at_server_assigned_version(monkeypatch) -> None:
    transport = ScriptedTransport(
        build_response(201, _account_body("a1", version=2)),
        build_response(200, _account_body("a1", version=2)),
        build_response(204),
    )
    monkeypatch.setattr(sample, "get_form3_client", lambda: _client(transport))

    assert sample.main() == 0
    assert transport.calls[2]["params"] == {"version": 2}
