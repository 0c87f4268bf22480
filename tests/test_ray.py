"""Unit tests for the ray module.

Tests cover:
- Ray construction and ray_at
- Refraction: disabled bending, matched media, Snell's law, total internal
  reflection
"""

import math

import numpy as np
import pytest

from src.whitted.core.ray import Ray, ray_at, refract
from src.whitted.core.vector import dot, length, normalize, vec3


class TestRayBasics:
    """Tests for Ray dataclass and ray_at."""

    def test_ray_accepts_sequences(self):
        """Test origin and direction are coerced to float arrays."""
        ray = Ray((0, 1, 2), (0, 0, 1))
        assert ray.origin.dtype == np.float64
        np.testing.assert_allclose(ray.origin, [0.0, 1.0, 2.0])

    def test_ray_at_origin(self):
        """Test ray_at returns origin when t=0."""
        ray = Ray(vec3(1.0, 2.0, 3.0), vec3(0.0, 0.0, -1.0))
        np.testing.assert_allclose(ray_at(ray, 0.0), [1.0, 2.0, 3.0])

    def test_ray_at_uses_unnormalized_direction(self):
        """Test t is measured in units of the direction's length."""
        ray = Ray(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, 2.0))
        np.testing.assert_allclose(ray_at(ray, 1.5), [0.0, 0.0, 3.0])


class TestRefract:
    """Tests for refract()."""

    def test_zero_refractivity_disables_bending(self):
        """Test refractivity 0 returns the incoming direction unchanged."""
        direction = vec3(1.0, -2.0, 3.0)
        result = refract(direction, vec3(0.0, 1.0, 0.0), 0.0)
        np.testing.assert_allclose(result, direction)

    def test_normal_incidence_passes_straight(self):
        """Test a ray along the normal is not bent, whatever the index."""
        normal = vec3(0.0, 0.0, -1.0)
        result = refract(vec3(0.0, 0.0, 1.0), normal, 1.5)
        np.testing.assert_allclose(result, [0.0, 0.0, 1.0], atol=1e-12)

    def test_matched_media_continue_straight(self):
        """Test an index of 1 continues an oblique ray without bending."""
        direction = vec3(1.0, 0.0, 1.0)
        result = refract(direction, vec3(0.0, 0.0, -1.0), 1.0)
        np.testing.assert_allclose(result, normalize(direction), atol=1e-12)

    def test_entering_bends_toward_normal(self):
        """Test Snell's law when entering a denser material."""
        theta_i = math.radians(45.0)
        direction = vec3(math.sin(theta_i), 0.0, math.cos(theta_i))
        normal = vec3(0.0, 0.0, -1.0)

        result = refract(direction, normal, 1.5)

        assert length(result) == pytest.approx(1.0)
        sin_t = result[0]
        assert sin_t == pytest.approx(math.sin(theta_i) / 1.5)
        assert result[2] > 0.0

    def test_exiting_bends_away_from_normal(self):
        """Test Snell's law when leaving the material (normal faces along the ray)."""
        theta_i = math.radians(20.0)
        direction = vec3(math.sin(theta_i), 0.0, math.cos(theta_i))
        normal = vec3(0.0, 0.0, 1.0)

        result = refract(direction, normal, 1.5)

        assert result[0] == pytest.approx(math.sin(theta_i) * 1.5)
        assert result[2] > 0.0

    def test_total_internal_reflection(self):
        """Test a steep exit reflects back inside instead of refracting."""
        theta_i = math.radians(70.0)
        direction = vec3(math.sin(theta_i), 0.0, math.cos(theta_i))
        normal = vec3(0.0, 0.0, 1.0)

        result = refract(direction, normal, 1.5)

        np.testing.assert_allclose(
            result, [math.sin(theta_i), 0.0, -math.cos(theta_i)], atol=1e-12
        )
        assert dot(result, normal) < 0.0
