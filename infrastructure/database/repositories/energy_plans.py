from __future__ import annotations

from app.domain.energy import EnergyPlan
from app.domain.exceptions import RepositoryError
from infrastructure.database.ops.energy_plans import EnergyPlanOperations


class EnergyPlanRepository:
    """Typed access to the single active energy plan.

    Satisfies ``app.services.protocols.EnergyPlanStore``.
    """

    def __init__(self, backend: EnergyPlanOperations) -> None:
        self._backend = backend

    def get_current_plan(self) -> EnergyPlan:
        row = self._backend.load_energy_plan()
        if row is None:
            # The plan row is seeded with the schema; a missing row means the
            # database was tampered with.
            raise RepositoryError("No current energy plan is stored")
        return EnergyPlan.from_row(row)

    def update_plan(self, plan: EnergyPlan) -> None:
        self._backend.save_energy_plan(plan.name, plan.daily_limit_kwh)
