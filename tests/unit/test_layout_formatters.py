"""Unit tests for layout exporters and formatters."""

import json

import pytest

from classrooms.application import GenerateLayoutCommand, GridInput, LayoutOutput, RoomInput
from classrooms.domain import AgentRequest
from classrooms.infrastructure import (
    FloorPlanDiagramFormatter,
    JsonExporter,
    LayoutSummaryFormatter,
    layout_to_dict,
)


@pytest.fixture
def output(generate_command: GenerateLayoutCommand) -> LayoutOutput:
    return generate_command.execute(
        RoomInput(width=10.0, depth=8.0, height=3.0), GridInput(occupant_count=4)
    )


class TestLayoutToDict:
    """Tests for layout_to_dict."""

    def test_sections(self, output: LayoutOutput) -> None:
        data = layout_to_dict(output)
        assert set(data) == {"desks", "anchors", "agents", "routes", "warnings"}
        assert len(data["desks"]) == 4
        assert data["anchors"]["door"] == {"x": 1.0, "y": 0.0, "z": 4.0}
        assert data["agents"][0] == {
            "agent_id": "student_0",
            "agent_name": "Student_0",
            "desk_id": "Desk_0_0",
        }

    def test_route_fields(self, output: LayoutOutput) -> None:
        route = layout_to_dict(output)["routes"][0]
        assert route["name"] == "EscapeRoute_student_0"
        assert route["route_type"] == "escape"
        assert route["movement_speed"] == 3.0
        assert [w["label"] for w in route["waypoints"]] == ["Desk", "Aisle", "Door", "Outside"]

    def test_errors_only_when_invalid(self) -> None:
        assert layout_to_dict(LayoutOutput(errors=["bad"])) == {"errors": ["bad"]}


class TestJsonExporter:
    """Tests for JsonExporter."""

    def test_parses_back(self, output: LayoutOutput) -> None:
        data = json.loads(JsonExporter().export(output))
        assert len(data["routes"]) == 8


class TestLayoutSummaryFormatter:
    """Tests for LayoutSummaryFormatter."""

    def test_sections(self, output: LayoutOutput) -> None:
        text = LayoutSummaryFormatter().format(output)
        assert "DESKS" in text
        assert "ANCHORS" in text
        assert "ROUTES" in text
        assert "WARNINGS" not in text
        assert "Desk -> Aisle -> Door -> Outside" in text
        assert "EscapeRoute_student_3" in text

    def test_errors(self) -> None:
        text = LayoutSummaryFormatter().format(LayoutOutput(errors=["students must be even"]))
        assert text == "Error: students must be even"


class TestFloorPlanDiagramFormatter:
    """Tests for FloorPlanDiagramFormatter."""

    def test_marks(self, output: LayoutOutput) -> None:
        text = FloorPlanDiagramFormatter().format(output, 10.0, 8.0)
        lines = text.splitlines()
        # Title, border, 16 rows, border, outside line.
        assert len(lines) == 20
        canvas = "\n".join(lines[2:-2])
        assert canvas.count("D") == 4
        assert canvas.count("B") == 1
        assert lines[-1].startswith("Outside:")

    def test_board_at_top_door_at_bottom(self, output: LayoutOutput) -> None:
        lines = FloorPlanDiagramFormatter().format(output, 10.0, 8.0).splitlines()
        assert "B" in lines[2]
        assert lines[17].count("|") == 3

    def test_invalid(self) -> None:
        text = FloorPlanDiagramFormatter().format(LayoutOutput(errors=["x"]), 10.0, 8.0)
        assert text == "No layout to display."


class TestExportedRouteType:
    """Exported route_type follows how the route was built."""

    def test_agent_named_like_a_route_kind(self, generate_command: GenerateLayoutCommand) -> None:
        output = generate_command.execute(
            RoomInput(width=10.0, depth=8.0, height=3.0),
            GridInput(occupant_count=4),
            agent_requests=[AgentRequest(agent_name="Escape")],
        )

        routes = {r["name"]: r for r in layout_to_dict(output)["routes"]}
        assert routes["EscapeRoute_student_Escape"]["route_type"] == "escape"
        assert routes["ReturnRoute_student_Escape"]["route_type"] == "return"
        assert len(output.escape_routes) == 4
        assert len(output.return_routes) == 4
