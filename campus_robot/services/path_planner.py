import os
from typing import List, Optional, Tuple

from campus_robot.models import Command, Coordinate, PlanStep


class PathPlanner:
    """
    Axis-aligned planner: travel along x first, then along y.

    Each axis with a non-zero delta gets one turn (RIGHT for a positive delta,
    LEFT for a negative one) followed by one FORWARD per grid unit. Turns are
    relative to an implicit starting heading, not compass bearings, so the
    plan does not depend on where the robot currently is.
    """

    def __init__(self, forward_ms: Optional[int] = None, turn_ms: Optional[int] = None):
        self.forward_ms = forward_ms if forward_ms is not None else int(os.getenv("PLANNER_FORWARD_MS", "800"))
        self.turn_ms = turn_ms if turn_ms is not None else int(os.getenv("PLANNER_TURN_MS", "500"))

    def plan(self, start: Optional[Coordinate], goal: Optional[Coordinate]) -> List[PlanStep]:
        if start is None or goal is None:
            return []
        steps: List[PlanStep] = []
        steps.extend(self._axis_steps(goal.x - start.x, "x"))
        steps.extend(self._axis_steps(goal.y - start.y, "y"))
        return steps

    def _axis_steps(self, delta: int, axis: str) -> List[PlanStep]:
        if delta == 0:
            return []
        turn = Command.RIGHT if delta > 0 else Command.LEFT
        total = abs(delta)
        steps = [
            PlanStep(
                command=turn,
                description=f"Turn {turn.value.lower()} to travel along {axis}",
                duration_ms=self.turn_ms,
            )
        ]
        for index in range(1, total + 1):
            steps.append(
                PlanStep(
                    command=Command.FORWARD,
                    description=f"Forward {index}/{total} along {axis}",
                    duration_ms=self.forward_ms,
                )
            )
        return steps

    @staticmethod
    def metrics(plan: List[PlanStep]) -> Tuple[int, int]:
        """Return (distance, estimated_time_ms) for a plan."""
        distance = sum(1 for step in plan if step.command == Command.FORWARD)
        estimated_time = sum(step.duration_ms for step in plan)
        return distance, estimated_time
