"""
Seed loader: runs a SeedPlan against a database session.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from travelhub.seed.plan import SeedPlan, SeedStep


class SeedError(Exception):
    """A seed step failed. ``kind`` is constraint_violation, connectivity, invalid_record or database."""

    def __init__(self, step: str, kind: str, cause: Exception):
        self.step = step
        self.kind = kind
        self.cause = cause
        super().__init__(f"seeding failed at step {step!r} ({kind}): {cause}")


def classify_error(exc: Exception) -> str:
    if isinstance(exc, IntegrityError):
        return "constraint_violation"
    if isinstance(exc, (OperationalError, InterfaceError)):
        return "connectivity"
    if isinstance(exc, ValidationError):
        return "invalid_record"
    return "database"


@dataclass
class SeedReport:
    """Primary keys created per step, in execution order."""
    created: Dict[str, List[Any]] = field(default_factory=dict)

    def record(self, step: str, ids: List[Any]) -> None:
        self.created[step] = ids

    def counts(self) -> Dict[str, int]:
        return {name: len(ids) for name, ids in self.created.items()}

    def total(self) -> int:
        return sum(self.counts().values())


class SeedLoader:
    """
    Insert the rows of a plan step by step.

    Each step's rows are flushed before the next step is built so generated
    ids are visible to dependants. With ``atomic`` the whole plan is one
    transaction; otherwise every step is committed on its own and a failure
    leaves the earlier steps in place.
    """

    def __init__(
        self,
        session: Session,
        plan: SeedPlan,
        atomic: bool = True,
        echo: Optional[Callable[[str], None]] = print,
    ):
        self.session = session
        self.plan = plan
        self.atomic = atomic
        self.echo = echo or (lambda message: None)

    def run(self) -> SeedReport:
        report = SeedReport()
        created: Dict[str, List[Any]] = {}

        self.echo("Start seeding...")
        for step in self.plan.ordered():
            try:
                rows = self._run_step(step, created)
            except (ValidationError, SQLAlchemyError) as e:
                self.session.rollback()
                raise SeedError(step.name, classify_error(e), e) from e

            created[step.name] = rows
            report.record(step.name, [_primary_key(row) for row in rows])
            line = step.describe(rows)
            if line:
                self.echo(line)

        if self.atomic:
            try:
                self.session.commit()
            except SQLAlchemyError as e:
                self.session.rollback()
                raise SeedError("commit", classify_error(e), e) from e

        self.echo("Seeding finished.")
        return report

    def _run_step(self, step: SeedStep, created: Dict[str, List[Any]]) -> List[Any]:
        records = step.build(created)
        rows = [step.model(**record.model_dump()) for record in records]
        self.session.add_all(rows)
        self.session.flush()
        if not self.atomic:
            self.session.commit()
        return rows


def _primary_key(row) -> Any:
    identity = inspect(row).identity
    if identity and len(identity) == 1:
        return identity[0]
    return identity
