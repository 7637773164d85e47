"""ControlPoint 엔티티 단위 테스트."""

from npc_path_tool.domain.entities.control_point import ControlPoint
from npc_path_tool.domain.enums import TangentSide
from npc_path_tool.domain.value_objects.vector import Vector3


class TestConstruction:
    def test_position(self):
        cp = ControlPoint(Vector3(1.0, 2.0, 3.0))
        assert cp.get_position() == Vector3(1.0, 2.0, 3.0)

    def test_default_tangents(self):
        cp = ControlPoint(Vector3())
        assert cp.get_front_tangent() == Vector3(1.0, 1.0, 1.0)
        assert cp.get_back_tangent() == Vector3(-1.0, -1.0, -1.0)

    def test_defaults_not_shared(self):
        a = ControlPoint(Vector3())
        b = ControlPoint(Vector3())
        a.set_front_tangent(Vector3(9.0, 0.0, 0.0))
        assert b.get_front_tangent() == Vector3.one()


class TestAccessors:
    def test_set_position_keeps_tangents(self):
        cp = ControlPoint(Vector3())
        cp.set_position(Vector3(4.0, 5.0, 6.0))
        assert cp.get_position() == Vector3(4.0, 5.0, 6.0)
        assert cp.get_front_tangent() == Vector3.one()
        assert cp.get_back_tangent() == -Vector3.one()

    def test_set_back_tangent(self):
        cp = ControlPoint(Vector3())
        cp.set_back_tangent(Vector3(0.0, 0.0, -2.0))
        assert cp.get_back_tangent() == Vector3(0.0, 0.0, -2.0)
        assert cp.get_front_tangent() == Vector3.one()

    def test_set_front_tangent(self):
        cp = ControlPoint(Vector3())
        cp.set_front_tangent(Vector3(3.0, 0.0, 0.0))
        assert cp.get_front_tangent() == Vector3(3.0, 0.0, 0.0)
        assert cp.get_back_tangent() == -Vector3.one()

    def test_tangents_are_independent(self):
        cp = ControlPoint(Vector3())
        cp.set_front_tangent(Vector3(2.0, 0.0, 0.0))
        cp.set_back_tangent(Vector3(0.0, 5.0, 0.0))
        assert cp.get_front_tangent() == Vector3(2.0, 0.0, 0.0)
        assert cp.get_back_tangent() == Vector3(0.0, 5.0, 0.0)

    def test_zero_tangent_allowed(self):
        cp = ControlPoint(Vector3())
        cp.set_front_tangent(Vector3.zero())
        assert cp.get_front_tangent() == Vector3.zero()

    def test_getter_idempotent(self):
        cp = ControlPoint(Vector3(1.0, 1.0, 1.0))
        assert cp.get_position() == cp.get_position()
        assert cp.get_back_tangent() == cp.get_back_tangent()


class TestTangentSelector:
    def test_get_tangent(self):
        cp = ControlPoint(Vector3())
        assert cp.get_tangent(TangentSide.BACK) == cp.get_back_tangent()
        assert cp.get_tangent(TangentSide.FRONT) == cp.get_front_tangent()

    def test_set_tangent_back(self):
        cp = ControlPoint(Vector3())
        cp.set_tangent(TangentSide.BACK, Vector3(0.0, 1.0, 0.0))
        assert cp.get_back_tangent() == Vector3(0.0, 1.0, 0.0)

    def test_set_tangent_front(self):
        cp = ControlPoint(Vector3())
        cp.set_tangent(TangentSide.FRONT, Vector3(0.0, 1.0, 0.0))
        assert cp.get_front_tangent() == Vector3(0.0, 1.0, 0.0)

    def test_tangent_point_is_absolute(self):
        cp = ControlPoint(Vector3(10.0, 0.0, 0.0))
        assert cp.get_tangent_point(TangentSide.FRONT) == Vector3(
            11.0, 1.0, 1.0
        )
        assert cp.get_tangent_point(TangentSide.BACK) == Vector3(
            9.0, -1.0, -1.0
        )
