"""
Departure simulation models for the Knowledge Risk Engine.

This module defines the result of a "what breaks if this person leaves"
simulation and the request value a caller uses to track in-flight
simulations.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import ImpactSeverity


class AffectedModule(BaseModel):
    """
    Projected state of one module after a departure.

    Attributes:
        module_id: Id of the affected module
        module_name: Name of the affected module
        current_bus_factor: Bus factor stored in the snapshot
        new_bus_factor: Projected bus factor after the departure
        impact: Severity of losing the person for this module
    """

    model_config = ConfigDict(frozen=True)

    module_id: str = Field(description="Id of the affected module")
    module_name: str = Field(description="Name of the affected module")
    current_bus_factor: int = Field(ge=0, description="Bus factor before departure")
    new_bus_factor: int = Field(ge=0, description="Projected bus factor after departure")
    impact: ImpactSeverity = Field(description="Per-module impact severity")


class SimulationResult(BaseModel):
    """
    Outcome of a hypothetical departure.

    A fresh result is allocated on every simulation; the snapshot the
    result was computed from is never modified.

    Attributes:
        person_id: Person whose departure was simulated
        affected_modules: Per-module projections, in knowledge-area order
        overall_impact: Most severe impact present among affected modules
        estimated_recovery_weeks: Rough time to restore coverage
        mitigations: Ordered recommendations
        critical_count: Affected modules with critical impact
        high_count: Affected modules with high impact
        medium_count: Affected modules with medium impact
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "person_id": "p1",
                "affected_modules": [
                    {
                        "module_id": "m1",
                        "module_name": "Payment Service",
                        "current_bus_factor": 1,
                        "new_bus_factor": 0,
                        "impact": "critical",
                    },
                ],
                "overall_impact": "critical",
                "estimated_recovery_weeks": 10,
                "mitigations": [
                    "Assign backup owners to 1 critical module(s)",
                    "Create documentation for sole-owned modules",
                    "Encourage pair programming to distribute knowledge",
                    "Update succession-planning documentation",
                ],
                "critical_count": 1,
                "high_count": 0,
                "medium_count": 0,
            }
        },
    )

    person_id: str = Field(description="Person whose departure was simulated")
    affected_modules: tuple[AffectedModule, ...] = Field(
        default=(), description="Per-module projections"
    )
    overall_impact: ImpactSeverity = Field(description="Aggregate severity")
    estimated_recovery_weeks: int = Field(ge=0, description="Estimated recovery time")
    mitigations: tuple[str, ...] = Field(description="Ordered recommendations")
    critical_count: int = Field(default=0, ge=0)
    high_count: int = Field(default=0, ge=0)
    medium_count: int = Field(default=0, ge=0)

    @field_validator("mitigations")
    @classmethod
    def validate_mitigations_not_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Every result carries at least the generic recommendations."""
        if not v:
            raise ValueError("At least one mitigation must be provided")
        return v

    @property
    def affected_module_ids(self) -> list[str]:
        return [m.module_id for m in self.affected_modules]


class SimulationRequest(BaseModel):
    """
    A caller-issued simulation request.

    ``generation`` increases with every request a session issues; only the
    result of the newest generation is kept.
    """

    model_config = ConfigDict(frozen=True)

    person_id: str = Field(min_length=1, description="Person to simulate")
    generation: int = Field(ge=1, description="Monotonic request counter")
