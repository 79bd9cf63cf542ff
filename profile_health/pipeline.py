"""Pipeline helpers for scoring snapshot files.

This module is the boundary between raw input and the engine:
1. Load snapshot JSON and validate it into a ProfileSnapshot
2. Score it with the EvaluatorRegistry
3. Wrap the result in an AuditRecord for the persistence layer
"""

import json
import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from profile_health.evaluators.registry import EvaluatorRegistry
from profile_health.models.model_eval import ScoringConfig
from profile_health.models.model_score import OverallResult
from profile_health.models.model_snapshot import ProfileSnapshot
from profile_health.models.model_storage import AuditRecord

logger = logging.getLogger(__name__)


class SnapshotLoadError(ValueError):
    """Raised when a snapshot file is missing or does not match the snapshot shape."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load snapshot {path}: {reason}")


def load_snapshot(path: Path | str) -> ProfileSnapshot:
    """Load and validate a snapshot JSON file.

    Args:
        path: Path to a JSON object in the directory API's field layout.

    Returns:
        Validated snapshot.

    Raises:
        SnapshotLoadError: If the file is missing, unreadable, not JSON, or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise SnapshotLoadError(path, "file not found")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(path, f"invalid JSON ({e})") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SnapshotLoadError(path, f"unreadable file ({e})") from e

    if not isinstance(data, dict):
        raise SnapshotLoadError(path, f"expected a JSON object, got {type(data).__name__}")

    try:
        snapshot = ProfileSnapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotLoadError(path, f"{e.error_count()} validation errors\n{e}") from e

    logger.debug(f"Loaded snapshot {path} ({snapshot.name or 'unnamed'})")
    return snapshot


def build_audit_record(
    result: OverallResult,
    evaluated_at: datetime,
    business_id: str | None = None,
) -> AuditRecord:
    """Wrap a result with the timestamp it was evaluated at."""
    return AuditRecord.from_result(result, evaluated_at=evaluated_at, business_id=business_id)


def run_scoring_pipeline(
    paths: Iterable[Path | str],
    now: datetime | None = None,
    config: ScoringConfig | None = None,
    registry: EvaluatorRegistry | None = None,
) -> list[AuditRecord]:
    """Load, score and wrap each snapshot file.

    Files that fail to load are logged and skipped. Every snapshot is scored
    against the same reference time.

    Args:
        paths: Snapshot JSON files. The file stem is used as business ID.
        now: Reference time (defaults to the registry clock)
        config: Scoring configuration (ignored when ``registry`` is given)
        registry: Registry to score with

    Returns:
        One audit record per successfully loaded snapshot.
    """
    registry = registry or EvaluatorRegistry(config=config)
    context = registry.build_context(now)

    records: list[AuditRecord] = []
    for path in paths:
        path = Path(path)
        try:
            snapshot = load_snapshot(path)
        except SnapshotLoadError as e:
            logger.warning(str(e))
            continue

        result = registry.evaluate(snapshot, now=context.now)
        records.append(build_audit_record(result, evaluated_at=context.now, business_id=path.stem))

    logger.info(f"Scored {len(records)} snapshot(s)")
    return records
