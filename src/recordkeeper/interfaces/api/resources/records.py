"""Record archive API resources."""

from uuid import UUID

import falcon.asgi

from recordkeeper.application.use_cases.legal_hold.place_legal_hold import (
    PlaceLegalHoldUseCase,
)
from recordkeeper.application.use_cases.legal_hold.release_legal_hold import (
    ReleaseLegalHoldUseCase,
)
from recordkeeper.application.use_cases.record.dispose_expired_records import (
    DisposeExpiredRecordsUseCase,
)
from recordkeeper.application.use_cases.record.get_record import GetRecordUseCase
from recordkeeper.application.use_cases.record.get_record_stats import GetRecordStatsUseCase
from recordkeeper.application.use_cases.record.list_records import ListRecordsUseCase
from recordkeeper.application.use_cases.record.verify_all_records import (
    VerifyAllRecordsUseCase,
)
from recordkeeper.application.use_cases.record.verify_record import VerifyRecordUseCase
from recordkeeper.domain.entities import Record, RecordHash
from recordkeeper.domain.exceptions import LegalHoldConflict, NotFound, ValidationError
from recordkeeper.domain.value_objects import RecordCategory, VerificationStatus


def _actor(req: falcon.asgi.Request) -> str:
    return getattr(req.context, "actor", None) or "system"


def _parse_record_id(record_id: str, resp: falcon.asgi.Response) -> UUID | None:
    try:
        return UUID(record_id)
    except ValueError:
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Invalid UUID"}
        return None


class RecordStatsResource:
    """GET /v1/records/stats - archive statistics."""

    def __init__(self, get_stats: GetRecordStatsUseCase) -> None:
        self._get_stats = get_stats

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        stats = await self._get_stats.execute()
        resp.media = stats.to_dict()
        resp.status = falcon.HTTP_200


class RecordsResource:
    """GET /v1/records - list active records with optional filters."""

    def __init__(self, list_records: ListRecordsUseCase) -> None:
        self._list_records = list_records

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            category = req.get_param("category")
            status = req.get_param("verification_status")
            records = await self._list_records.execute(
                category=RecordCategory(category.upper()) if category else None,
                verification_status=VerificationStatus(status.upper()) if status else None,
                legal_hold=req.get_param_as_bool("legal_hold"),
            )
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {"items": [_record_to_dict(r) for r in records]}
        resp.status = falcon.HTTP_200


class RecordResource:
    """GET /v1/records/{record_id} - record with latest verifications."""

    def __init__(self, get_record: GetRecordUseCase) -> None:
        self._get_record = get_record

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, record_id: str
    ) -> None:
        rid = _parse_record_id(record_id, resp)
        if rid is None:
            return
        try:
            detail = await self._get_record.execute(rid)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Record not found"}
            return

        body = _record_to_dict(detail.record)
        body["verifications"] = [_record_hash_to_dict(v) for v in detail.verifications]
        resp.media = body
        resp.status = falcon.HTTP_200


class RecordVerifyResource:
    """POST /v1/records/{record_id}/verify - verify one record."""

    def __init__(self, verify_record: VerifyRecordUseCase) -> None:
        self._verify_record = verify_record

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, record_id: str
    ) -> None:
        rid = _parse_record_id(record_id, resp)
        if rid is None:
            return
        try:
            outcome = await self._verify_record.execute(rid, _actor(req))
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Record not found"}
            return

        resp.media = outcome.to_dict()
        resp.status = falcon.HTTP_200


class VerifyAllResource:
    """POST /v1/records/verify-all - verify the whole archive."""

    def __init__(self, verify_all: VerifyAllRecordsUseCase) -> None:
        self._verify_all = verify_all

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        report = await self._verify_all.execute(_actor(req))
        resp.media = report.to_dict()
        resp.status = falcon.HTTP_200


class LegalHoldResource:
    """POST/DELETE /v1/records/{record_id}/legal-hold - place or release legal hold."""

    def __init__(
        self,
        place_legal_hold: PlaceLegalHoldUseCase,
        release_legal_hold: ReleaseLegalHoldUseCase,
    ) -> None:
        self._place = place_legal_hold
        self._release = release_legal_hold

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, record_id: str
    ) -> None:
        rid = _parse_record_id(record_id, resp)
        if rid is None:
            return
        try:
            body = await req.get_media()
            reason = body["reason"]
            if not isinstance(reason, str):
                raise TypeError("reason must be a string")
        except (KeyError, TypeError, falcon.HTTPBadRequest) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"reason required: {e}"}
            return

        try:
            record = await self._place.execute(rid, _actor(req), reason)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Record not found"}
            return
        except LegalHoldConflict as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = _record_to_dict(record)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, record_id: str
    ) -> None:
        rid = _parse_record_id(record_id, resp)
        if rid is None:
            return
        try:
            record = await self._release.execute(rid, _actor(req))
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Record not found"}
            return
        except LegalHoldConflict as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return

        resp.media = _record_to_dict(record)
        resp.status = falcon.HTTP_200


class DisposeExpiredResource:
    """POST /v1/records/dispose-expired - dispose records past retention."""

    def __init__(self, dispose_expired: DisposeExpiredRecordsUseCase) -> None:
        self._dispose_expired = dispose_expired

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        report = await self._dispose_expired.execute(_actor(req))
        resp.media = report.to_dict()
        resp.status = falcon.HTTP_200


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def _record_to_dict(r: Record) -> dict:
    return {
        "id": str(r.id),
        "record_number": r.record_number,
        "filename": r.filename,
        "archive_path": r.archive_path,
        "size": r.size,
        "hash": r.hash,
        "hash_algorithm": r.hash_algorithm,
        "category": r.category.value,
        "created_at": _iso(r.created_at),
        "retain_until": _iso(r.retain_until),
        "legal_hold": r.legal_hold,
        "legal_hold_reason": r.legal_hold_reason,
        "legal_hold_by": r.legal_hold_by,
        "legal_hold_at": _iso(r.legal_hold_at),
        "verification_status": r.verification_status.value,
        "last_verified_at": _iso(r.last_verified_at),
    }


def _record_hash_to_dict(h: RecordHash) -> dict:
    return {
        "id": str(h.id),
        "computed_hash": h.computed_hash,
        "expected_hash": h.expected_hash,
        "matched": h.matched,
        "verified_at": _iso(h.verified_at),
        "verified_by": h.verified_by,
        "file_exists": h.file_exists,
        "file_size": h.file_size,
        "error": h.error,
    }
