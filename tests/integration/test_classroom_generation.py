"""End-to-end tests for classroom layout generation.

Covers the standard six-occupant classroom from configuration file to
exported layout, checking the geometry downstream scene assembly relies
on.
"""

import json
from typing import Any

import pytest

from classrooms.application import get_factory
from classrooms.application.config import load_config
from classrooms.domain import WaypointLabel
from classrooms.infrastructure import layout_to_dict

pytestmark = pytest.mark.integration


@pytest.fixture
def output(write_config, config_data: dict[str, Any]):
    config = load_config(write_config(config_data))
    return get_factory().create_generate_command().execute_config(config)


class TestStandardClassroom:
    """Six occupants in a 10m x 8m room."""

    def test_desks(self, output) -> None:
        desks = {d.desk_id: d for d in output.desks}
        assert len(desks) == 6
        assert desks["Desk_0_0"].position.x == pytest.approx(-2.0)
        assert desks["Desk_0_0"].position.z == pytest.approx(-2.0)
        assert desks["Desk_1_2"].position.x == pytest.approx(2.0)
        assert desks["Desk_1_2"].position.z == pytest.approx(2.0)

    def test_anchors(self, output) -> None:
        anchors = output.anchors
        assert anchors.door.as_tuple() == pytest.approx((1.0, 0.0, 4.0))
        assert anchors.outside.as_tuple() == pytest.approx((1.0, 0.0, 6.0))
        assert anchors.board.as_tuple() == pytest.approx((0.0, 1.5, -3.95))

    def test_board_clear_of_desks(self, output) -> None:
        front_z = min(d.position.z for d in output.desks)
        assert output.anchors.board.z <= front_z - 1.0

    def test_every_occupant_has_both_routes(self, output) -> None:
        for agent in output.agents:
            names = [r.name for r in output.routes_for(agent.agent_id)]
            assert names == [f"EscapeRoute_{agent.agent_id}", f"ReturnRoute_{agent.agent_id}"]

    def test_routes_start_and_end_at_desk(self, output) -> None:
        for agent in output.agents:
            escape, ret = output.routes_for(agent.agent_id)
            assert escape.start.position == agent.desk.position
            assert escape.end.label is WaypointLabel.OUTSIDE
            assert ret.start.position == output.anchors.outside
            assert ret.end.position == agent.desk.position

    def test_aisle_waypoints(self, output) -> None:
        escape = output.routes_for("student_3")[0]
        aisle = escape.waypoints[1]
        assert aisle.name == "student_3_Escape_02_Aisle"
        assert aisle.position.as_tuple() == pytest.approx((0.0, 0.0, 3.0))

    def test_waypoint_names_unique(self, output) -> None:
        names = [w.name for r in output.routes for w in r.waypoints]
        assert len(names) == len(set(names)) == 48

    def test_deterministic_export(self, write_config, config_data: dict[str, Any]) -> None:
        command = get_factory().create_generate_command()
        path = write_config(config_data)
        first = json.dumps(layout_to_dict(command.execute_config(load_config(path))))
        second = json.dumps(layout_to_dict(command.execute_config(load_config(path))))
        assert first == second


class TestManualOverrides:
    """Configuration overrides flowing through generation."""

    def test_manual_door_on_front_wall(self, write_config, config_data: dict[str, Any]) -> None:
        config_data["classroom"]["door_position"] = {"x": -4.0, "y": 0.0, "z": -4.0}
        config = load_config(write_config(config_data))
        output = get_factory().create_generate_command().execute_config(config)

        assert output.anchors.door.as_tuple() == pytest.approx((-4.0, 0.0, -4.0))
        assert output.anchors.outside.z == pytest.approx(-6.0)

    def test_student_configs(self, write_config, config_data: dict[str, Any]) -> None:
        config_data["student_configs"] = [
            {"student_id": "maya", "student_name": "Maya", "desk_id": "Desk_1_1"},
            {"student_name": "Leo"},
        ]
        config = load_config(write_config(config_data))
        output = get_factory().create_generate_command().execute_config(config)

        by_desk = {a.desk.desk_id: a for a in output.agents}
        assert by_desk["Desk_1_1"].agent_id == "maya"
        assert by_desk["Desk_0_1"].agent_id == "student_Leo"
        assert output.routes_for("maya")[0].waypoints[0].name == "maya_Escape_01_Desk"
