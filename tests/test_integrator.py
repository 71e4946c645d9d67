"""Tests for the Whitted integrator.

Tests cover:
- Local Phong shading: ambient term, back-facing lights, hard shadows
- Fresnel splitting and total internal reflection
- Energy weighting of the local term
- Recursion stopping at MAX_DEPTH
"""

import math

import numpy as np
import pytest

from conftest import assert_vec_close
from whitted.core.ray import Ray
from whitted.core.vector import Vector3
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.materials.material import Material
from whitted.materials.presets import MaterialPresets
from whitted.renderer import integrator
from whitted.scene.scene import PointLight, Scene, SceneOptions

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)


@pytest.fixture
def floor_scene(white_diffuse):
    """White floor at y=0 with one white light straight above the origin."""
    scene = Scene(SceneOptions())
    floor = Plane(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), white_diffuse)
    scene.add_entity(floor)
    scene.add_point_light(PointLight(Vector3(0.0, 10.0, 0.0), WHITE))
    return scene


def hit_floor(scene):
    ray = Ray(Vector3(0.0, 1.0, -1.0), Vector3(0.0, -1.0, 1.0))
    entity, hit = scene.intersect(ray)
    return ray, entity, hit


class TestShadeLocal:
    """Tests for ambient + Phong shading with shadow rays."""

    def test_unoccluded_diffuse(self, floor_scene):
        ray, entity, hit = hit_floor(floor_scene)
        assert_vec_close(hit.position, Vector3(0.0, 0.0, 0.0))
        assert_vec_close(integrator.shade_local(floor_scene, hit, entity, ray), WHITE)

    def test_blocker_casts_shadow(self, floor_scene, red_diffuse):
        floor_scene.add_entity(Sphere(Vector3(0.0, 5.0, 0.0), 1.0, red_diffuse))
        ray, entity, hit = hit_floor(floor_scene)
        assert integrator.shade_local(floor_scene, hit, entity, ray) == BLACK

    def test_blocker_beyond_light_casts_no_shadow(self, floor_scene, red_diffuse):
        floor_scene.add_entity(Sphere(Vector3(0.0, 15.0, 0.0), 1.0, red_diffuse))
        ray, entity, hit = hit_floor(floor_scene)
        assert_vec_close(integrator.shade_local(floor_scene, hit, entity, ray), WHITE)

    def test_light_behind_surface(self, floor_scene):
        floor_scene.lights[0].position = Vector3(0.0, -10.0, 0.0)
        ray, entity, hit = hit_floor(floor_scene)
        assert integrator.shade_local(floor_scene, hit, entity, ray) == BLACK

    def test_ambient_term(self):
        scene = Scene(SceneOptions())
        material = Material(ambient_color=Vector3(0.2, 0.4, 0.6))
        scene.add_entity(Plane(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), material))
        scene.set_ambient_light_color(Vector3(0.5, 0.5, 1.0))
        ray, entity, hit = hit_floor(scene)
        assert_vec_close(integrator.shade_local(scene, hit, entity, ray), Vector3(0.1, 0.2, 0.6))

        scene.options.ambient_lighting_enabled = False
        assert integrator.shade_local(scene, hit, entity, ray) == BLACK

    def test_specular_highlight(self):
        """The mirror direction of the light adds the full specular color."""
        scene = Scene(SceneOptions())
        material = Material(diffuse_color=BLACK, specular_color=Vector3(0.5, 0.5, 0.5), shininess=16.0)
        scene.add_entity(Plane(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), material))
        scene.add_point_light(PointLight(Vector3(0.0, 1.0, 1.0), WHITE))
        ray, entity, hit = hit_floor(scene)
        assert_vec_close(integrator.shade_local(scene, hit, entity, ray), Vector3(0.5, 0.5, 0.5))

    def test_occlusion_skips_excluded_entity(self, red_diffuse):
        blocker = Sphere(Vector3(0.0, 5.0, 0.0), 1.0, red_diffuse)
        shadow_ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert integrator.is_occluded([blocker], shadow_ray, 10.0)
        assert not integrator.is_occluded([blocker], shadow_ray, 10.0, exclude=blocker)


class TestFresnelSplit:
    """Tests for reflected/transmitted weights at a dielectric interface."""

    def test_normal_incidence(self):
        split = integrator.fresnel_split(0.0, 1.0, 1.5, Vector3(0.0, 0.0, -1.0), Vector3(0.0, 0.0, 1.0))
        assert split.kr == pytest.approx(0.04)
        assert split.kt == pytest.approx(0.96)
        assert not split.tir
        assert split.eta == pytest.approx(1.0 / 1.5)

    def test_exit_flips_normal_and_swaps_indices(self):
        split = integrator.fresnel_split(0.0, 1.0, 1.5, Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, 1.0))
        assert_vec_close(split.normal, Vector3(0.0, 0.0, -1.0))
        assert split.cosi == pytest.approx(1.0)
        assert split.eta == pytest.approx(1.5)

    def test_total_internal_reflection(self):
        # 60 degrees from the normal, leaving glass: beyond the ~41.8 degree critical angle
        d = Vector3(math.sin(math.radians(60)), math.cos(math.radians(60)), 0.0)
        split = integrator.fresnel_split(0.0, 1.0, 1.5, d, Vector3(0.0, 1.0, 0.0))
        assert split.tir
        assert split.kr == 1.0
        assert split.kt == 0.0

    def test_weights_never_exceed_one(self):
        rng = np.random.default_rng(9)
        for _ in range(500):
            n = rng.uniform(1.0, 2.5)
            kt = rng.uniform(0.0, 1.0)
            theta = rng.uniform(0.0, math.pi / 2)
            d = Vector3(math.sin(theta), -math.cos(theta), 0.0)
            if rng.random() < 0.5:
                d = -d
            split = integrator.fresnel_split(0.0, kt, n, d, Vector3(0.0, 1.0, 0.0))
            assert 0.0 <= split.kr <= 1.0
            assert split.kr + split.kt <= 1.0 + 1e-12

    def test_reflectivity_is_capped(self):
        split = integrator.fresnel_split(1.0, 1.0, 1.5, Vector3(0.0, 0.0, -1.0), Vector3(0.0, 0.0, 1.0))
        assert split.kr == 1.0

    def test_refraction_obeys_snell(self):
        theta = math.radians(30)
        d = Vector3(math.sin(theta), -math.cos(theta), 0.0)
        split = integrator.fresnel_split(0.0, 1.0, 1.5, d, Vector3(0.0, 1.0, 0.0))
        t = integrator.refract_direction(d, split)
        assert math.isclose(t.length(), 1.0)
        assert t.x == pytest.approx(math.sin(theta) / 1.5)
        assert t.y < 0.0

    def test_normal_incidence_passes_straight_through(self):
        d = Vector3(0.0, 0.0, -1.0)
        split = integrator.fresnel_split(0.0, 1.0, 1.5, d, Vector3(0.0, 0.0, 1.0))
        assert_vec_close(integrator.refract_direction(d, split), d)


class TestTrace:
    """Tests for the recursive trace."""

    @pytest.fixture
    def depth_log(self, monkeypatch):
        """Record the depth of every trace call, recursive ones included."""
        depths = []
        original = integrator.trace

        def counting_trace(scene, ray, depth=0):
            depths.append(depth)
            return original(scene, ray, depth)

        monkeypatch.setattr(integrator, "trace", counting_trace)
        return depths

    @staticmethod
    def facing_planes(material):
        scene = Scene(SceneOptions())
        scene.add_entity(Plane(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0), material))
        scene.add_entity(Plane(Vector3(0.0, 0.0, 2.0), Vector3(0.0, 0.0, -1.0), material))
        return scene

    def test_miss_returns_background(self, empty_scene):
        color = integrator.trace(empty_scene, Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0)))
        assert color == integrator.BACKGROUND_COLOR

    def test_mirror_recursion_stops_at_max_depth(self, depth_log):
        scene = self.facing_planes(MaterialPresets.mirror())
        integrator.trace(scene, Ray(Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, 1.0)), 0)
        assert depth_log == list(range(integrator.MAX_DEPTH + 1))

    def test_glass_recursion_stops_at_max_depth(self, depth_log):
        scene = self.facing_planes(MaterialPresets.glass())
        integrator.trace(scene, Ray(Vector3(0.0, 0.0, 1.0), Vector3(0.3, 0.0, 1.0)), 0)
        assert max(depth_log) == integrator.MAX_DEPTH
        assert depth_log.count(0) == 1

    def test_no_recursion_at_max_depth(self, depth_log):
        scene = self.facing_planes(MaterialPresets.mirror())
        integrator.trace(scene, Ray(Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, 1.0)), integrator.MAX_DEPTH)
        assert depth_log == [integrator.MAX_DEPTH]

    def test_reflectivity_scales_local_term(self):
        """An opaque surface keeps (1 - kr) of its local color."""
        scene = Scene(SceneOptions())
        material = Material(ambient_color=WHITE, diffuse_color=BLACK, reflectivity=0.25)
        scene.add_entity(Plane(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0), material))
        scene.set_ambient_light_color(WHITE)
        color = integrator.trace(scene, Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0)))
        assert_vec_close(color, Vector3(0.75, 0.75, 0.75))

    def test_transmissivity_boost(self):
        """kt is scaled by KT_SCALE before the remaining local weight is taken."""
        scene = Scene(SceneOptions())
        material = Material(ambient_color=WHITE, diffuse_color=BLACK,
                            transmissivity=0.5, refractive_index=1.0)
        scene.add_entity(Plane(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0), material))
        scene.set_ambient_light_color(WHITE)
        color = integrator.trace(scene, Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0)))
        assert_vec_close(color, Vector3(0.25, 0.25, 0.25))

    def test_glass_sees_through_to_background_object(self):
        scene = Scene(SceneOptions())
        scene.add_entity(Plane(Vector3(0.0, 0.0, 2.0), Vector3(0.0, 0.0, -1.0), MaterialPresets.water()))
        red_wall = Material(ambient_color=Vector3(1.0, 0.0, 0.0), diffuse_color=BLACK)
        scene.add_entity(Plane(Vector3(0.0, 0.0, 6.0), Vector3(0.0, 0.0, -1.0), red_wall))
        scene.set_ambient_light_color(WHITE)
        color = integrator.trace(scene, Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0)))
        assert color.x > 0.9
        assert color.y == 0.0
