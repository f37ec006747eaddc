"""
Departure Simulator: "What Breaks If This Person Leaves?"

This module projects the state of every module a person knows after that
person becomes unavailable, aggregates the projections into one severity,
estimates recovery time and suggests mitigations.

Simulation algorithm:
1. Resolve the person; unknown ids raise PersonNotFoundError
2. Resolve each knowledge area to a module by name (unresolved names skipped)
3. Project each module's bus factor:
   - sole owner leaving: bus factor drops to 0, impact CRITICAL
   - otherwise: max(1, bus_factor - 1), impact HIGH at 1, MEDIUM at 2, else LOW
4. Overall impact is the most severe impact present
5. Recovery weeks = 8 per critical + 4 per high + 2 baseline
6. Mitigations: targeted ones for critical/high impacts, then generic ones

The simulator is stateless. The snapshot is read, never modified, and every
call allocates a fresh SimulationResult.

Version: departure_sim_v1
"""

from collections import Counter

import structlog

from knowledge_risk.models.enums import ImpactSeverity
from knowledge_risk.models.simulation import AffectedModule, SimulationResult
from knowledge_risk.models.snapshot import KnowledgeArea, Module, Snapshot


# Weeks added to the recovery estimate per affected module, by impact
RECOVERY_WEEKS_PER_IMPACT = {
    ImpactSeverity.CRITICAL: 8,
    ImpactSeverity.HIGH: 4,
}
# Onboarding and knowledge-transfer overhead, regardless of severity
RECOVERY_BASELINE_WEEKS = 2

GENERIC_MITIGATIONS = (
    "Encourage pair programming to distribute knowledge",
    "Update succession-planning documentation",
)


class PersonNotFoundError(LookupError):
    """Raised when a simulation is requested for an unknown person id."""

    def __init__(self, person_id: str):
        self.person_id = person_id
        super().__init__(f"Person not found: {person_id!r}")


class DepartureSimulator:
    """
    Simulates the departure of one person from a snapshot.

    Attributes:
        logger: Structured logger

    Example:
        >>> simulator = DepartureSimulator()
        >>> result = simulator.simulate("p1", snapshot)
        >>> print(result.overall_impact, result.estimated_recovery_weeks)
    """

    def __init__(self):
        """Initialize the simulator."""
        self.logger = structlog.get_logger()

    def simulate(self, person_id: str, snapshot: Snapshot) -> SimulationResult:
        """
        Simulate the departure of a person.

        Args:
            person_id: Id of the departing person
            snapshot: Snapshot to simulate against

        Returns:
            SimulationResult with per-module projections and aggregates

        Raises:
            PersonNotFoundError: If no person with this id exists
        """
        person = snapshot.get_person(person_id)
        if person is None:
            self.logger.info(
                "departure_person_not_found",
                person_id=person_id,
                snapshot_id=snapshot.snapshot_id,
            )
            raise PersonNotFoundError(person_id)

        affected = []
        for area in person.knowledge_areas:
            module = snapshot.find_module_by_name(area.module)
            if module is None:
                self.logger.debug(
                    "knowledge_area_unresolved",
                    person_id=person_id,
                    module_name=area.module,
                )
                continue
            affected.append(self.project_module(module, area))

        counts = Counter(m.impact for m in affected)
        n_critical = counts[ImpactSeverity.CRITICAL]
        n_high = counts[ImpactSeverity.HIGH]

        result = SimulationResult(
            person_id=person.id,
            affected_modules=tuple(affected),
            overall_impact=self.aggregate_impact([m.impact for m in affected]),
            estimated_recovery_weeks=self.estimate_recovery_weeks(n_critical, n_high),
            mitigations=tuple(self.build_mitigations(n_critical, n_high)),
            critical_count=n_critical,
            high_count=n_high,
            medium_count=counts[ImpactSeverity.MEDIUM],
        )

        self.logger.info(
            "departure_simulated",
            person_id=person.id,
            snapshot_id=snapshot.snapshot_id,
            affected_modules=len(affected),
            overall_impact=result.overall_impact.value,
            recovery_weeks=result.estimated_recovery_weeks,
        )

        return result

    @staticmethod
    def project_module(module: Module, area: KnowledgeArea) -> AffectedModule:
        """
        Project one module's bus factor and impact after the departure.

        Args:
            module: The module the person knows
            area: The person's knowledge of that module

        Returns:
            AffectedModule projection
        """
        if area.is_only_owner:
            new_bus_factor = 0
            impact = ImpactSeverity.CRITICAL
        else:
            new_bus_factor = max(1, module.bus_factor - 1)
            if new_bus_factor == 1:
                impact = ImpactSeverity.HIGH
            elif new_bus_factor == 2:
                impact = ImpactSeverity.MEDIUM
            else:
                impact = ImpactSeverity.LOW

        return AffectedModule(
            module_id=module.id,
            module_name=module.name,
            current_bus_factor=module.bus_factor,
            new_bus_factor=new_bus_factor,
            impact=impact,
        )

    @staticmethod
    def aggregate_impact(impacts: list[ImpactSeverity]) -> ImpactSeverity:
        """
        Most severe impact present, LOW when there are none.

        Only presence matters, not how many modules share a tier.
        """
        present = set(impacts)
        for severity in (
            ImpactSeverity.CRITICAL,
            ImpactSeverity.HIGH,
            ImpactSeverity.MEDIUM,
        ):
            if severity in present:
                return severity
        return ImpactSeverity.LOW

    @staticmethod
    def estimate_recovery_weeks(n_critical: int, n_high: int) -> int:
        """Weeks to restore coverage after the departure."""
        return (
            RECOVERY_WEEKS_PER_IMPACT[ImpactSeverity.CRITICAL] * n_critical
            + RECOVERY_WEEKS_PER_IMPACT[ImpactSeverity.HIGH] * n_high
            + RECOVERY_BASELINE_WEEKS
        )

    @staticmethod
    def build_mitigations(n_critical: int, n_high: int) -> list[str]:
        """Ordered recommendations; the generic ones always close the list."""
        mitigations = []
        if n_critical > 0:
            mitigations.append(
                f"Assign backup owners to {n_critical} critical module(s)"
            )
            mitigations.append("Create documentation for sole-owned modules")
        if n_high > 0:
            mitigations.append(
                f"Schedule knowledge-transfer sessions for {n_high} high-impact area(s)"
            )
        mitigations.extend(GENERIC_MITIGATIONS)
        return mitigations


_default_simulator = DepartureSimulator()


def simulate_departure(person_id: str, snapshot: Snapshot) -> SimulationResult:
    """
    Simulate the departure of a person using the shared simulator.

    Raises:
        PersonNotFoundError: If no person with this id exists
    """
    return _default_simulator.simulate(person_id, snapshot)
