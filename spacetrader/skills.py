"""Character skills that grow over real time and from experience."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum

SKILL_POINTS_PER_SECOND = 0.1
SKILL_LEVEL_THRESHOLDS = (100, 300, 600, 1000, 1500)
MAX_SKILL_LEVEL = len(SKILL_LEVEL_THRESHOLDS)


class SkillCategory(Enum):
    """Area of expertise a skill covers."""

    MINING = "Mining"
    TRADING = "Trading"
    COMBAT = "Combat"
    NAVIGATION = "Navigation"
    RESEARCH = "Research"
    ENGINEERING = "Engineering"

    def __str__(self) -> str:
        return self.value

    def description(self) -> str:
        """What training this skill improves."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    SkillCategory.MINING: (
        "Improves resource extraction efficiency, reduces mining time, and increases yield."
    ),
    SkillCategory.TRADING: (
        "Improves buying and selling prices, unlocks special market deals, "
        "and increases market information."
    ),
    SkillCategory.COMBAT: (
        "Improves weapon efficacy, targeting, and ship maneuverability in combat situations."
    ),
    SkillCategory.NAVIGATION: "Improves ship speed, jump range, and fuel efficiency.",
    SkillCategory.RESEARCH: (
        "Reduces blueprint research time and improves research outcomes."
    ),
    SkillCategory.ENGINEERING: (
        "Reduces craft time, improves equipment quality, and reduces materials required."
    ),
}


def _level_for(points: int) -> int:
    for level, threshold in enumerate(SKILL_LEVEL_THRESHOLDS):
        if points < threshold:
            return level
    return MAX_SKILL_LEVEL


def _level_bounds(level: int) -> tuple[int, int]:
    lower = 0 if level == 0 else SKILL_LEVEL_THRESHOLDS[level - 1]
    return lower, SKILL_LEVEL_THRESHOLDS[level]


@dataclass
class Skill:
    """A trainable skill; active skills accumulate points over time."""

    category: SkillCategory
    points: int = 0
    level: int = 0
    active: bool = False
    last_update: float | None = field(default_factory=time.time)

    def activate(self) -> bool:
        """Start training; return False if the skill was already active."""
        if self.active:
            return False
        self.active = True
        self.last_update = time.time()
        return True

    def deactivate(self) -> bool:
        """Stop training. Always returns False."""
        self.active = False
        return False

    def update(self, current_time: float) -> None:
        """Accumulate points for the time passed since the last update."""
        if not self.active or self.last_update is None:
            return
        elapsed = current_time - self.last_update
        if elapsed <= 0:
            return
        self.points += int(elapsed * SKILL_POINTS_PER_SECOND)
        self.level = _level_for(self.points)
        self.last_update = current_time

    def progress_to_next_level(self) -> float:
        """Progress through the current level as a percentage."""
        if self.level >= MAX_SKILL_LEVEL:
            return 100.0
        return self.level_progress() * 100.0

    def efficiency_bonus(self) -> float:
        return self.level * 0.1

    def time_reduction(self) -> float:
        return min(self.level * 0.05, 0.25)

    def quality_bonus(self) -> float:
        return self.level * 0.05

    def add_experience(self, amount: float) -> None:
        """Add experience points; every call adds at least one point."""
        gained = int(amount) if amount > 0 else 0
        self.points += max(gained, 1)
        self.level = _level_for(self.points)
        self.last_update = time.time()

    def level_progress(self) -> float:
        """Progress through the current level as a fraction from 0.0 to 1.0."""
        if self.level >= MAX_SKILL_LEVEL:
            return 1.0
        lower, upper = _level_bounds(self.level)
        return (self.points - lower) / (upper - lower)


@dataclass
class SkillSet:
    """One skill for every category."""

    skills: list[Skill] = field(
        default_factory=lambda: [Skill(category) for category in SkillCategory]
    )

    def get(self, category: SkillCategory) -> Skill | None:
        return next((skill for skill in self.skills if skill.category is category), None)

    def activate(self, category: SkillCategory) -> bool:
        skill = self.get(category)
        return skill.activate() if skill is not None else False

    def deactivate(self, category: SkillCategory) -> bool:
        skill = self.get(category)
        return skill.deactivate() if skill is not None else False

    def update_all(self) -> None:
        """Advance every skill to the present moment."""
        now = time.time()
        for skill in self.skills:
            skill.update(now)

    def mining_level(self) -> int:
        skill = self.get(SkillCategory.MINING)
        return skill.level if skill is not None else 1

    def gain_mining_experience(self, amount: int) -> None:
        skill = self.get(SkillCategory.MINING)
        if skill is not None:
            skill.add_experience(amount)

    def meets_mining_requirement(self, required_level: int) -> bool:
        return self.mining_level() >= required_level

    def mining_progress(self) -> float:
        skill = self.get(SkillCategory.MINING)
        return skill.level_progress() if skill is not None else 0.0