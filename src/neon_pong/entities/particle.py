"""
Particle record for collision sparks.
"""

from __future__ import annotations

from dataclasses import dataclass

# per-tick multiplicative shrink of a particle's radius
SHRINK_FACTOR = 0.96


@dataclass
class Particle:
    """
    A short-lived spark.

    :ivar x (float): X position.
    :ivar y (float): Y position.
    :ivar radius (float): Current radius.
    :ivar vx (float): X velocity (units/tick).
    :ivar vy (float): Y velocity (units/tick).
    :ivar life (float): Remaining life, 1.0 when spawned.
    :ivar decay (float): Life lost per tick.
    """

    x: float
    y: float
    radius: float
    vx: float
    vy: float
    life: float = 1.0
    decay: float = 0.02

    @property
    def opacity(self) -> float:
        """Opacity for rendering, derived from life."""
        return max(0.0, min(1.0, self.life))


def update_particle(particle: Particle):
    """Advance one tick: move, age and shrink."""
    particle.x += particle.vx
    particle.y += particle.vy
    particle.life -= particle.decay
    particle.radius *= SHRINK_FACTOR


def is_expired(particle: Particle) -> bool:
    """Whether the particle should be removed."""
    return particle.life <= 0
