"""Seed dev data from scripts/seed-data.json into the configured database.

Loads deceased records and the police reports linked to them. Records are
keyed by full_name + location_found and reports by case_id, so running
the script twice does not duplicate rows.

Usage:
    uv run python -m scripts.seed_dev_data [path/to/seed-data.json] [--create-tables]

Default path: scripts/seed-data.json (relative to project root).
Requires: DATABASE_URL. Without --create-tables the schema must already
exist (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from datetime import date, time
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.enums import IdentificationStatus, ReportStatus
from app.infrastructure.persistence import database
from app.infrastructure.persistence.models import DeceasedRecord, InvestigationReport


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


def _parse_date(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _parse_time(value: str | None) -> time | None:
    return time.fromisoformat(value) if value else None


async def _get_or_create_record(session: AsyncSession, data: dict[str, Any]) -> str:
    stmt = select(DeceasedRecord.id).where(
        DeceasedRecord.full_name == data["full_name"],
        DeceasedRecord.location_found == data.get("location_found"),
    )
    existing = (await session.execute(stmt)).scalar_one_or_none()
    if existing:
        return existing
    record = DeceasedRecord(
        full_name=data["full_name"],
        date_of_death=_parse_date(data.get("date_of_death")),
        time_of_death=_parse_time(data.get("time_of_death")),
        date_found=_parse_date(data.get("date_found")),
        time_found=_parse_time(data.get("time_found")),
        location_found=data.get("location_found"),
        condition_of_body=data.get("condition_of_body"),
        clothing_description=data.get("clothing_description"),
        personal_effects=data.get("personal_effects"),
        distinguishing_marks=data.get("distinguishing_marks"),
        identification_status=IdentificationStatus(
            data.get("identification_status", IdentificationStatus.UNIDENTIFIED.value)
        ).value,
        is_public_viewable=bool(data.get("is_public_viewable", False)),
    )
    session.add(record)
    await session.flush()
    print(f"  Deceased record {record.full_name} -> {record.id}")
    return record.id


async def _get_or_create_report(
    session: AsyncSession, data: dict[str, Any], deceased_record_id: str
) -> None:
    stmt = select(InvestigationReport.id).where(
        InvestigationReport.case_id == data["case_id"]
    )
    if (await session.execute(stmt)).scalar_one_or_none():
        print(f"  Police report {data['case_id']} exists, skipped")
        return
    report = InvestigationReport(
        case_id=data["case_id"],
        deceased_record_id=deceased_record_id,
        jurisdiction=data.get("jurisdiction"),
        circumstances_of_discovery=data.get("circumstances_of_discovery"),
        evidence_collected=data.get("evidence_collected"),
        officer_notes=data.get("officer_notes"),
        report_status=ReportStatus(
            data.get("report_status", ReportStatus.DRAFT.value)
        ).value,
    )
    session.add(report)
    await session.flush()
    print(f"  Police report {report.case_id} -> {report.id}")


async def run(path: Path, create_tables: bool = False) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    seed = json.loads(path.read_text(encoding="utf-8"))

    session_factory = database.get_session_factory()
    if create_tables:
        async with database.engine.begin() as conn:
            await conn.run_sync(database.Base.metadata.create_all)
        print("Tables created.")

    try:
        async with session_factory() as session:
            async with session.begin():
                record_ids: dict[str, str] = {}
                for data in seed.get("deceased_records", []):
                    record_ids[data["ref"]] = await _get_or_create_record(session, data)
                for data in seed.get("investigation_reports", []):
                    deceased_id = record_ids.get(data["deceased_ref"])
                    if not deceased_id:
                        print(
                            f"  Skip report {data['case_id']}: "
                            f"record {data['deceased_ref']} not found",
                            file=sys.stderr,
                        )
                        continue
                    await _get_or_create_report(session, data, deceased_id)
    finally:
        await database.dispose_engine()

    print("Seed completed.")


def main() -> None:
    root = _project_root()
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    path = Path(args[0]) if args else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path, create_tables="--create-tables" in sys.argv[1:]))


if __name__ == "__main__":
    main()
