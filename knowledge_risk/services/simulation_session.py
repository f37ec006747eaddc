"""
Simulation session: caller-side last-request-wins policy.

The departure simulator is stateless. A caller that lets a user pick people
in quick succession needs to make sure a slow result for an earlier pick
never overwrites the result for a later one. SimulationSession tracks the
selected person and the current result, and tags every request with a
generation number; only the newest generation's result is accepted.

A request for an unknown person finishes in a not-found state
(``not_found_person_id``) rather than staying pending, so callers can show
"person not found" instead of a spinner.

Example:
    >>> session = SimulationSession(store)
    >>> request = session.begin("p1")
    >>> result = session.run(request)
    >>> session.complete(request, result)
    True
"""

import threading
from typing import Optional

import structlog

from knowledge_risk.engine.departure_simulator import (
    DepartureSimulator,
    PersonNotFoundError,
)
from knowledge_risk.models.simulation import SimulationRequest, SimulationResult
from knowledge_risk.storage.snapshot_store import SnapshotStore


class SimulationSession:
    """
    Tracks the selected person and the latest accepted simulation result.

    Attributes:
        store: Snapshot store simulations read from
        simulator: Departure simulator
        logger: Structured logger
    """

    def __init__(
        self,
        store: SnapshotStore,
        simulator: Optional[DepartureSimulator] = None,
    ):
        self.store = store
        self.simulator = simulator or DepartureSimulator()
        self.logger = structlog.get_logger()
        self._lock = threading.Lock()
        self._generation = 0
        self._selected_person_id: Optional[str] = None
        self._result: Optional[SimulationResult] = None
        self._not_found_person_id: Optional[str] = None

    @property
    def selected_person_id(self) -> Optional[str]:
        with self._lock:
            return self._selected_person_id

    @property
    def result(self) -> Optional[SimulationResult]:
        with self._lock:
            return self._result

    @property
    def not_found_person_id(self) -> Optional[str]:
        """Id of the newest request's person if it was not in the snapshot."""
        with self._lock:
            return self._not_found_person_id

    @property
    def is_pending(self) -> bool:
        """True while the newest request has neither a result nor an error."""
        with self._lock:
            return (
                self._selected_person_id is not None
                and self._result is None
                and self._not_found_person_id is None
            )

    def begin(self, person_id: str) -> SimulationRequest:
        """
        Start a new simulation request, superseding any in flight.

        The previous result and not-found state are cleared so neither is
        shown next to the new selection.
        """
        with self._lock:
            self._generation += 1
            self._selected_person_id = person_id
            self._result = None
            self._not_found_person_id = None
            request = SimulationRequest(person_id=person_id, generation=self._generation)

        self.logger.debug(
            "simulation_requested",
            person_id=person_id,
            generation=request.generation,
        )
        return request

    def run(self, request: SimulationRequest) -> SimulationResult:
        """
        Compute the result for a request against the current snapshot.

        Raises:
            PersonNotFoundError: If the person is not in the snapshot
            SnapshotNotLoadedError: If the store has no snapshot
        """
        return self.simulator.simulate(request.person_id, self.store.current())

    def complete(self, request: SimulationRequest, result: SimulationResult) -> bool:
        """
        Offer a finished result.

        Returns:
            True if the result was accepted, False if a newer request exists
        """
        with self._lock:
            accepted = request.generation == self._generation
            latest = self._generation
            if accepted:
                self._result = result

        if not accepted:
            self.logger.info(
                "simulation_result_discarded",
                person_id=request.person_id,
                generation=request.generation,
                latest_generation=latest,
            )
        return accepted

    def fail(self, request: SimulationRequest, error: PersonNotFoundError) -> bool:
        """
        Record that a request's person does not exist.

        Returns:
            True if recorded, False if a newer request exists
        """
        with self._lock:
            accepted = request.generation == self._generation
            if accepted:
                self._not_found_person_id = error.person_id

        if accepted:
            self.logger.info(
                "simulation_person_not_found",
                person_id=error.person_id,
                generation=request.generation,
            )
        return accepted

    def simulate(self, person_id: str) -> Optional[SimulationResult]:
        """
        Begin, run and complete in one call.

        Returns:
            The result if it is still the newest, otherwise None

        Raises:
            PersonNotFoundError: After recording the not-found state
        """
        request = self.begin(person_id)
        try:
            result = self.run(request)
        except PersonNotFoundError as e:
            self.fail(request, e)
            raise
        return result if self.complete(request, result) else None

    def reset(self) -> None:
        """Clear the selection and result; in-flight results are discarded."""
        with self._lock:
            self._generation += 1
            self._selected_person_id = None
            self._result = None
            self._not_found_person_id = None
