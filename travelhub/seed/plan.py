"""
Ordered build plan for seeding.

A plan is a list of insertion steps, each naming the steps whose rows it
references. The loader walks the steps in dependency order; earlier rows are
handed to later builders so they can pick up generated ids.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel

# step name -> ORM rows inserted by that step
CreatedRows = Mapping[str, List[Any]]


class SeedPlanError(ValueError):
    """Raised for a malformed plan: duplicate names, unknown dependencies or cycles."""


@dataclass(frozen=True)
class SeedStep:
    name: str
    model: type
    build: Callable[[CreatedRows], List[BaseModel]]
    depends_on: Tuple[str, ...] = ()
    message: Optional[Callable[[List[Any]], Optional[str]]] = None

    def describe(self, rows: List[Any]) -> Optional[str]:
        """Progress line for the step; None means the step prints nothing."""
        if self.message is None:
            return f"Created {len(rows)} {self.name}"
        return self.message(rows)


@dataclass
class SeedPlan:
    steps: Sequence[SeedStep]
    _by_name: Dict[str, SeedStep] = field(init=False, repr=False)

    def __post_init__(self):
        self._by_name = {}
        for step in self.steps:
            if step.name in self._by_name:
                raise SeedPlanError(f"duplicate step name: {step.name}")
            self._by_name[step.name] = step

        for step in self.steps:
            for dep in step.depends_on:
                if dep not in self._by_name:
                    raise SeedPlanError(f"step {step.name!r} depends on unknown step {dep!r}")

    def __len__(self) -> int:
        return len(self.steps)

    def step(self, name: str) -> SeedStep:
        return self._by_name[name]

    def ordered(self) -> List[SeedStep]:
        """Topological order of the steps; ties keep declaration order."""
        remaining = {s.name: set(s.depends_on) for s in self.steps}
        done = set()
        order = []

        while remaining:
            ready = next(
                (s for s in self.steps if s.name in remaining and remaining[s.name] <= done),
                None,
            )
            if ready is None:
                raise SeedPlanError(f"dependency cycle among steps: {sorted(remaining)}")
            order.append(ready)
            done.add(ready.name)
            del remaining[ready.name]

        return order

    def names(self) -> List[str]:
        return [s.name for s in self.ordered()]
