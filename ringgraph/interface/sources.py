"""Simulated sample sources for the demo dashboard."""

import math
import random


class WaveSource:
    """Utilization-like percentages following a noisy sine wave."""

    def __init__(self, period=60, phase=0.0, noise=8, seed=None):
        self.period = period
        self.phase = phase
        self.noise = noise
        self.random = random.Random(seed)
        self.step = 0

    def sample(self):
        """Return the next value in ``[0, 100]``."""
        angle = 2 * math.pi * self.step / self.period + self.phase
        self.step += 1
        value = 50 + 40 * math.sin(angle) + self.random.uniform(-self.noise, self.noise)
        return int(min(100, max(0, round(value))))


class BurstSource:
    """Mostly idle load with occasional bursts of unbounded size."""

    def __init__(self, burst_chance=0.1, ceiling=5000, seed=None):
        self.burst_chance = burst_chance
        self.ceiling = ceiling
        self.random = random.Random(seed)

    def sample(self):
        if self.random.random() < self.burst_chance:
            return self.random.randint(self.ceiling // 2, self.ceiling)
        return self.random.randint(0, self.ceiling // 10)
