"""Per-second rate sampling that decides how hot the log stream is.

The machine counts lines and re-evaluates only when the wall-clock second
changes, using the count gathered since the previous evaluation. It is not
thread-safe on its own; HeatLogger guards it with its lock.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from heatlog.core.colors import Transform

HEATING_UP_BANNER = "It's heating up!!! "
ON_FIRE_BANNER = "It's on fire!!! "
BLAZING_BANNER = "Boomshakalaka!!! "

DEFAULT_HEATING_UP = 10
DEFAULT_ON_FIRE = 20
DEFAULT_BLAZING_AFTER = 5


class HeatState(Enum):
    COLD = "cold"
    COOLING_DOWN = "cooling_down"
    HEATING_UP = "heating_up"
    ON_FIRE = "on_fire"


@dataclass(frozen=True)
class HeatSnapshot:
    state: HeatState
    transform: Transform
    count: int
    period: int
    fire_period: int
    announcement: Optional[str]


@dataclass
class HeatMachine:
    heating_up_rate: int = DEFAULT_HEATING_UP
    on_fire_rate: int = DEFAULT_ON_FIRE
    blazing_after: int = DEFAULT_BLAZING_AFTER
    state: HeatState = HeatState.COLD
    transform: Transform = Transform.NONE
    count: int = 0
    period: int = 0
    fire_period: int = 0
    announcement: Optional[str] = None

    def advance(self, now: float) -> None:
        self.count += 1
        period = math.floor(now)
        # a late reading from a past second counts toward the current one
        if period <= self.period:
            return
        self.period = period
        self._evaluate(self.count, period)
        self.count = 0

    def _evaluate(self, rate: int, period: int) -> None:
        if self.state is HeatState.COLD:
            self.transform = Transform.NONE
            if rate > self.heating_up_rate:
                self.announcement = HEATING_UP_BANNER
                self.state = HeatState.HEATING_UP
                self.transform = Transform.WARMING

        elif self.state is HeatState.COOLING_DOWN:
            # exactly at the threshold: stay put, keep whatever is showing
            if rate > self.heating_up_rate:
                self.state = HeatState.HEATING_UP
                self.transform = Transform.WARMING
            elif rate < self.heating_up_rate:
                self.state = HeatState.COLD
                self.transform = Transform.NONE

        elif self.state is HeatState.HEATING_UP:
            self.transform = Transform.WARMING
            if rate > self.on_fire_rate:
                self.announcement = ON_FIRE_BANNER
                self.state = HeatState.ON_FIRE
                self.fire_period = period
                self.transform = Transform.FIRE

        elif self.state is HeatState.ON_FIRE:
            # maybe we cooled off.
            if rate < self.on_fire_rate:
                self.state = HeatState.COOLING_DOWN
                self.transform = Transform.WARMING
            elif self.fire_period + self.blazing_after < period:
                if self.transform is not Transform.BLAZING:
                    self.announcement = BLAZING_BANNER
                self.transform = Transform.BLAZING
            else:
                self.transform = Transform.FIRE

    def take_announcement(self) -> Optional[str]:
        banner, self.announcement = self.announcement, None
        return banner

    def snapshot(self) -> HeatSnapshot:
        return HeatSnapshot(
            state=self.state,
            transform=self.transform,
            count=self.count,
            period=self.period,
            fire_period=self.fire_period,
            announcement=self.announcement,
        )
