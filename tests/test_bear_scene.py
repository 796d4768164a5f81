"""Unit tests for the bear face scene.

Tests cover:
- Scene composition and default camera
- Colors seen along rays through key features
"""

import numpy as np


def _ray_color(objects, target):
    from teddycast.core.renderer import cast_ray
    from teddycast.core.vector import normalize, vec3

    origin = vec3(0.0, 0.0, 0.0)
    return cast_ray(origin, normalize(np.asarray(target, dtype=np.float64)), objects)


class TestBearComposition:
    """Tests for create_bear_scene."""

    def test_scene_has_nine_spheres(self):
        """Test the number and type of primitives."""
        from teddycast.geometry.sphere import Sphere
        from teddycast.scene.bear import create_bear_objects

        objects = create_bear_objects()
        assert isinstance(objects, tuple)
        assert len(objects) == 9
        assert all(isinstance(obj, Sphere) for obj in objects)

    def test_head_is_first(self):
        """Test the head sphere leads the scene."""
        from teddycast.scene.bear import FUR, create_bear_objects

        head = create_bear_objects()[0]
        assert head.center == (0.0, 0.0, -5.0)
        assert head.radius == 1.0
        assert head.material == FUR

    def test_default_camera(self):
        """Test the camera sits at the origin facing the head."""
        from teddycast.scene.bear import create_bear_scene

        _, camera = create_bear_scene()
        assert np.allclose(camera.eye, (0.0, 0.0, 0.0))
        assert np.allclose(camera.center, (0.0, 0.0, -5.0))
        assert np.allclose(camera.forward, (0.0, 0.0, -1.0))

    def test_ears_are_mirrored(self):
        """Test that the left and right ears mirror each other in x."""
        from teddycast.scene.bear import create_bear_objects

        objects = create_bear_objects()
        left_ear, right_ear = objects[1], objects[3]
        assert left_ear.center[0] == -right_ear.center[0]
        assert left_ear.center[1:] == right_ear.center[1:]
        assert left_ear.radius == right_ear.radius


class TestBearFeatures:
    """Tests for what a ray through each feature sees."""

    def test_center_ray_sees_fur(self):
        """Test the view axis hits the head before the muzzle."""
        from teddycast.core.renderer import nearest_intersect
        from teddycast.core.vector import vec3
        from teddycast.scene.bear import FUR_COLOR, create_bear_objects

        objects = create_bear_objects()
        hit = nearest_intersect(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, -1.0), objects)

        assert abs(hit.distance - 4.0) < 1e-9
        assert hit.material.diffuse == FUR_COLOR

    def test_nose_is_black(self):
        """Test the nose sits in front of the muzzle and head."""
        from teddycast.core.color import Color
        from teddycast.scene.bear import create_bear_objects

        assert _ray_color(create_bear_objects(), (0.0, -0.3, -4.2)) == Color(0, 0, 0)

    def test_eyes_are_black(self):
        """Test both eyes are visible in front of the head."""
        from teddycast.core.color import Color
        from teddycast.scene.bear import create_bear_objects

        objects = create_bear_objects()
        assert _ray_color(objects, (-0.45, 0.1, -4.2)) == Color(0, 0, 0)
        assert _ray_color(objects, (0.45, 0.1, -4.2)) == Color(0, 0, 0)

    def test_inner_ears_are_white(self):
        """Test the inner ears are visible in front of the ears."""
        from teddycast.scene.bear import INNER_EAR_COLOR, create_bear_objects

        objects = create_bear_objects()
        assert _ray_color(objects, (-0.75, 0.75, -4.75)) == INNER_EAR_COLOR
        assert _ray_color(objects, (0.75, 0.75, -4.75)) == INNER_EAR_COLOR

    def test_outside_the_face_is_background(self):
        """Test a ray well to the side of the bear."""
        from teddycast.core.renderer import BACKGROUND_COLOR
        from teddycast.scene.bear import create_bear_objects

        assert _ray_color(create_bear_objects(), (3.0, 0.0, -5.0)) == BACKGROUND_COLOR
