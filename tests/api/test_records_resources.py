"""Record API resource tests."""

from datetime import timedelta
from uuid import uuid4

from tests.conftest import NOW, add_record


def test_stats(client, fake_uow, content_store) -> None:
    add_record(fake_uow, content_store, "REC-2025-001", retain_until=NOW)
    add_record(fake_uow, content_store, "REC-2025-002", legal_hold=True)

    result = client.simulate_get("/v1/records/stats")

    assert result.status_code == 200
    assert result.json["total"] == 2
    assert result.json["with_legal_hold"] == 1
    assert result.json["expired"] == 1
    assert result.json["by_status"] == {"PENDING": 2}


def test_list_records_with_filter(client, fake_uow, content_store) -> None:
    add_record(fake_uow, content_store, "REC-2025-001")
    add_record(fake_uow, content_store, "REC-2025-002", legal_hold=True)

    result = client.simulate_get("/v1/records", params={"legal_hold": "true"})

    assert result.status_code == 200
    assert [r["record_number"] for r in result.json["items"]] == ["REC-2025-002"]


def test_list_records_invalid_category(client) -> None:
    result = client.simulate_get("/v1/records", params={"category": "spaceship"})
    assert result.status_code == 400


def test_get_record(client, fake_uow, content_store) -> None:
    record = add_record(fake_uow, content_store, "REC-2025-001")
    client.simulate_post(f"/v1/records/{record.id}/verify")

    result = client.simulate_get(f"/v1/records/{record.id}")

    assert result.status_code == 200
    assert result.json["record_number"] == "REC-2025-001"
    assert result.json["verification_status"] == "VERIFIED"
    assert result.json["verifications"][0]["matched"] is True


def test_get_record_invalid_uuid(client) -> None:
    result = client.simulate_get("/v1/records/not-a-uuid")
    assert result.status_code == 400
    assert result.json["error"] == "Invalid UUID"


def test_get_record_not_found(client) -> None:
    result = client.simulate_get(f"/v1/records/{uuid4()}")
    assert result.status_code == 404


def test_verify_record_uses_actor_header(client, fake_uow, content_store) -> None:
    record = add_record(fake_uow, content_store, "REC-2025-001")
    content_store.files[record.archive_path] = b"archived cOntent"

    result = client.simulate_post(
        f"/v1/records/{record.id}/verify", headers={"X-Actor": "auditor"}
    )

    assert result.status_code == 200
    assert result.json["status"] == "FAILED"
    assert fake_uow.record_hashes.entries[-1].verified_by == "auditor"


def test_verify_all(client, fake_uow, content_store) -> None:
    add_record(fake_uow, content_store, "REC-2025-001")
    missing = add_record(fake_uow, content_store, "REC-2025-002")
    del content_store.files[missing.archive_path]

    result = client.simulate_post("/v1/records/verify-all")

    assert result.status_code == 200
    assert result.json["total"] == 2
    assert result.json["verified"] == 1
    assert result.json["errors"] == 1
    assert result.json["error_records"][0]["record_number"] == "REC-2025-002"
    assert fake_uow.record_hashes.entries[0].verified_by == "system"


def test_place_and_release_legal_hold(client, fake_uow, content_store) -> None:
    record = add_record(fake_uow, content_store, "REC-2025-001")
    url = f"/v1/records/{record.id}/legal-hold"

    placed = client.simulate_post(
        url, json={"reason": "Litigation"}, headers={"X-Actor": "counsel"}
    )
    again = client.simulate_post(url, json={"reason": "Litigation"})
    released = client.simulate_delete(url)
    released_again = client.simulate_delete(url)

    assert placed.status_code == 200
    assert placed.json["legal_hold"] is True
    assert placed.json["legal_hold_by"] == "counsel"
    assert again.status_code == 409
    assert released.status_code == 200
    assert released.json["legal_hold"] is False
    assert released_again.status_code == 409


def test_place_legal_hold_requires_reason(client, fake_uow, content_store) -> None:
    record = add_record(fake_uow, content_store, "REC-2025-001")
    url = f"/v1/records/{record.id}/legal-hold"

    assert client.simulate_post(url, json={}).status_code == 400
    assert client.simulate_post(url, json={"reason": "  "}).status_code == 400
    assert client.simulate_post(url, json={"reason": 7}).status_code == 400


def test_place_legal_hold_unknown_record(client) -> None:
    result = client.simulate_post(
        f"/v1/records/{uuid4()}/legal-hold", json={"reason": "Litigation"}
    )
    assert result.status_code == 404


def test_dispose_expired(client, fake_uow, content_store) -> None:
    expired = NOW - timedelta(days=1)
    add_record(fake_uow, content_store, "REC-2025-001", retain_until=expired, legal_hold=True)
    add_record(fake_uow, content_store, "REC-2025-002", retain_until=expired)

    result = client.simulate_post("/v1/records/dispose-expired")

    assert result.status_code == 200
    assert result.json["count"] == 1
    assert result.json["records"][0]["record_number"] == "REC-2025-002"
    remaining = client.simulate_get("/v1/records").json["items"]
    assert [r["record_number"] for r in remaining] == ["REC-2025-001"]
