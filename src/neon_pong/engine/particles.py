"""
Particle subsystem: bursts of sparks at collision sites.
"""

from __future__ import annotations

import random
from typing import Iterator

from neon_pong.entities.particle import Particle, is_expired, update_particle

SIZE_RANGE = (2.0, 6.0)
SPEED_RANGE = (-4.0, 4.0)
DECAY_RANGE = (0.01, 0.03)


class ParticleSystem:
    """
    Owns every live particle.

    There is no cap on live particles; bursts only happen on collisions,
    so the population is bounded by collision rate and decay.
    """

    def __init__(self, rng: random.Random | None = None):
        """
        :param rng: Random source for particle properties.
        :type rng: random.Random, optional
        """
        self.rng = rng or random.Random()
        self.particles: list[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    def spawn(self, x: float, y: float, count: int):
        """Append ``count`` new particles at (x, y)."""
        for _ in range(count):
            self.particles.append(
                Particle(
                    x=x,
                    y=y,
                    radius=self.rng.uniform(*SIZE_RANGE),
                    vx=self.rng.uniform(*SPEED_RANGE),
                    vy=self.rng.uniform(*SPEED_RANGE),
                    life=1.0,
                    decay=self.rng.uniform(*DECAY_RANGE),
                )
            )

    def update(self):
        """Advance every particle and drop the expired ones."""
        for particle in self.particles:
            update_particle(particle)
        self.particles = [p for p in self.particles if not is_expired(p)]

    def clear(self):
        """Remove all particles."""
        self.particles.clear()
