from campus_robot.models import Command, Coordinate
from campus_robot.services.path_planner import PathPlanner


def commands(plan):
    return [step.command for step in plan]


def test_positive_x_negative_y_plan():
    planner = PathPlanner(forward_ms=800, turn_ms=500)
    plan = planner.plan(Coordinate(x=0, y=0), Coordinate(x=5, y=-3))

    assert commands(plan) == (
        [Command.RIGHT] + [Command.FORWARD] * 5 + [Command.LEFT] + [Command.FORWARD] * 3
    )
    assert plan[1].description == "Forward 1/5 along x"
    assert plan[5].description == "Forward 5/5 along x"
    assert plan[-1].description == "Forward 3/3 along y"

    distance, estimated_time = planner.metrics(plan)
    assert distance == 8
    assert estimated_time == 2 * 500 + 8 * 800


def test_library_to_student_center():
    planner = PathPlanner(forward_ms=800, turn_ms=500)
    plan = planner.plan(Coordinate(x=10, y=15), Coordinate(x=-5, y=20))

    assert plan[0].command == Command.LEFT
    assert commands(plan[1:16]) == [Command.FORWARD] * 15
    assert plan[16].command == Command.RIGHT
    assert commands(plan[17:]) == [Command.FORWARD] * 5
    assert planner.metrics(plan) == (20, 17000)


def test_same_pair_plans_identically():
    planner = PathPlanner()
    start, goal = Coordinate(x=-20, y=15), Coordinate(x=35, y=20)

    assert planner.plan(start, goal) == planner.plan(start, goal)


def test_single_axis_and_zero_delta():
    planner = PathPlanner()

    only_y = planner.plan(Coordinate(x=3, y=0), Coordinate(x=3, y=2))
    assert commands(only_y) == [Command.RIGHT, Command.FORWARD, Command.FORWARD]

    assert planner.plan(Coordinate(x=1, y=1), Coordinate(x=1, y=1)) == []


def test_unresolved_endpoint_yields_empty_plan():
    planner = PathPlanner()

    assert planner.plan(None, Coordinate(x=1, y=1)) == []
    assert planner.plan(Coordinate(x=1, y=1), None) == []
    assert planner.metrics([]) == (0, 0)


def test_durations_from_environment(monkeypatch):
    monkeypatch.setenv("PLANNER_FORWARD_MS", "100")
    monkeypatch.setenv("PLANNER_TURN_MS", "40")

    plan = PathPlanner().plan(Coordinate(x=0, y=0), Coordinate(x=-2, y=0))
    assert [step.duration_ms for step in plan] == [40, 100, 100]
