"""Tests for SceneObject composition, transforms and per-tick motion."""

import pytest

from painter3d import Camera, Plane, SceneNode, SceneObject


def coords(p):
    return (p.x, p.y, p.z)


class TestComposition:

    def test_add_point_is_owned_and_parented(self):
        obj = SceneObject()
        p = obj.add_point(1, 2, 3)
        assert p.parent is obj
        assert obj.entries == [p]

    def test_add_child_reparents(self):
        a, b = SceneObject(), SceneObject()
        child = SceneObject(1, 0, 0)
        a.add_child(child)
        b.add_child(child)
        assert child.parent is b
        assert child not in a.entries
        assert b.entries == [child]

    def test_cannot_nest_into_itself(self):
        obj = SceneObject()
        with pytest.raises(ValueError):
            obj.add_child(obj)

    def test_cannot_nest_into_descendant(self):
        root = SceneObject()
        child = root.add_child(SceneObject())
        grandchild = child.add_child(SceneObject())
        with pytest.raises(ValueError):
            child.add_child(root)
        with pytest.raises(ValueError):
            grandchild.add_child(root)
        # tree left intact
        assert root.parent is None
        assert [o for o in root.walk()] == [root, child, grandchild]

    def test_add_plane_requires_points(self):
        obj = SceneObject()
        with pytest.raises(ValueError):
            obj.add_plane(Plane())
        plane = obj.add_plane(Plane([obj.add_point(0, 0, 0)]))
        assert obj.planes == [plane]

    def test_walk_and_nodes(self):
        root = SceneObject()
        p = root.add_point(0, 0, 0)
        child = root.add_child(SceneObject())
        q = child.add_point(1, 1, 1)
        grandchild = child.add_child(SceneObject())
        assert list(root.walk()) == [root, child, grandchild]
        assert list(root.nodes()) == [p, child, q, grandchild]

    def test_clear_projections_recurses(self):
        cam = Camera()
        root = SceneObject()
        child = root.add_child(SceneObject())
        q = child.add_point(1, 1, 1)
        for n in (root, child, q):
            n.project(cam)
        root.clear_projections()
        assert root.projected is None
        assert child.projected is None
        assert q.projected is None

    def test_center(self):
        obj = SceneObject(10, 0, 0)
        obj.add_point(-1, 0, 0)
        obj.add_point(1, 2, 0)
        assert coords(obj.center()) == (10, 1, 0)
        assert coords(SceneObject(5, 5, 5).center()) == (5, 5, 5)


class TestTransforms:

    def test_scale_does_not_cross_object_boundary(self):
        root = SceneObject()
        p = root.add_point(1, 1, 1)
        child = root.add_child(SceneObject(2, 0, 0))
        q = child.add_point(1, 0, 0)
        root.scale(3)
        assert coords(p) == (3, 3, 3)
        assert coords(child) == (6, 0, 0)
        assert coords(q) == (1, 0, 0)

    def test_rotate_turns_entries_around_origin(self):
        obj = SceneObject(100, 0, 0)
        p = obj.add_point(1, 0, 0)
        obj.rotate(0, 0, 90)
        assert coords(p) == pytest.approx((0, 1, 0))
        # the object itself does not move
        assert coords(obj) == (100, 0, 0)

    def test_rotate_cascades_into_children(self):
        root = SceneObject()
        child = root.add_child(SceneObject(10, 0, 0))
        q = child.add_point(1, 0, 0)
        grandchild = child.add_child(SceneObject(0, 2, 0))
        r = grandchild.add_point(0, 0, 3)
        root.rotate(0, 0, 90)
        assert coords(child) == pytest.approx((0, 10, 0))
        assert coords(q) == pytest.approx((0, 1, 0))
        assert coords(grandchild) == pytest.approx((-2, 0, 0))
        assert coords(r) == pytest.approx((0, 0, 3))
        assert coords(q.absolute_position()) == pytest.approx((0, 11, 0))

    def test_turn_moves_object_around_parent_origin(self):
        obj = SceneObject(0, 0, 5)
        p = obj.add_point(1, 0, 0)
        obj.turn(0, 90, 0)
        assert coords(obj) == pytest.approx((5, 0, 0))
        # entries keep their local offsets on a plain turn
        assert coords(p) == (1, 0, 0)


class TestTimer:

    def test_speed_integrates_without_drift(self):
        obj = SceneObject()
        obj.set_speed(1, 0, 0)
        for _ in range(25):
            obj.timer()
        assert coords(obj) == (25, 0, 0)

    def test_no_motion_by_default(self):
        obj = SceneObject(1, 2, 3)
        p = obj.add_point(1, 0, 0)
        obj.timer()
        assert coords(obj) == (1, 2, 3)
        assert coords(p) == (1, 0, 0)

    def test_order_speed_then_turn_then_rotation(self):
        obj = SceneObject()
        p = obj.add_point(1, 0, 0)
        obj.set_speed(0, 0, 1)
        obj.set_turn(0, 90, 0)
        obj.set_rotation(0, 0, 90)
        obj.timer()
        # moved to (0,0,1) first, then turned about the y axis to (1,0,0)
        assert coords(obj) == pytest.approx((1, 0, 0))
        assert coords(p) == pytest.approx((0, 1, 0))

    def test_stop(self):
        obj = SceneObject()
        obj.set_speed(1, 1, 1)
        obj.set_turn(1, 1, 1)
        obj.set_rotation(1, 1, 1)
        obj.stop()
        obj.timer()
        assert coords(obj) == (0, 0, 0)

    def test_plain_node_entries_are_scene_nodes(self):
        obj = SceneObject()
        assert isinstance(obj.add_point(0, 0, 0), SceneNode)
