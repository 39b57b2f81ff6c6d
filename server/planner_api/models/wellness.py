"""Wellness log request/response models."""
from datetime import date, datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from wellness import Mood, WellnessLog


class WellnessLogIn(BaseModel):
    """Daily wellness log as sent by the client."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    date: Union[datetime, date]
    sleep_hours: float = Field(default=0.0, ge=0, alias="sleepHours")
    water_intake: int = Field(default=0, ge=0, alias="waterIntake")
    exercise_minutes: int = Field(default=0, ge=0, alias="exerciseMinutes")
    mood: Mood = Mood.CONTENT
    sleep_goal: Optional[float] = Field(default=None, alias="sleepGoal")
    water_goal: Optional[int] = Field(default=None, alias="waterGoal")
    exercise_goal: Optional[int] = Field(default=None, alias="exerciseGoal")

    def to_domain(self) -> WellnessLog:
        return WellnessLog(
            id=self.id,
            date=self.date,
            sleep_hours=self.sleep_hours,
            water_intake=self.water_intake,
            exercise_minutes=self.exercise_minutes,
            mood=self.mood,
            sleep_goal=self.sleep_goal,
            water_goal=self.water_goal,
            exercise_goal=self.exercise_goal,
        )


class StreakRequest(BaseModel):
    """Logs to evaluate, optionally as of a given instant."""

    model_config = ConfigDict(populate_by_name=True)

    logs: list[WellnessLogIn]
    as_of: Optional[datetime] = Field(default=None, alias="asOf")


class StreakResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    streak: int
    as_of: datetime = Field(serialization_alias="asOf")


class GoalProgressOut(BaseModel):
    """Progress toward one daily wellness goal."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    metric: str
    current_value: float = Field(serialization_alias="currentValue")
    target: float
    unit: str
    progress_percent: float = Field(serialization_alias="progressPercent")
    remaining: float
    achieved: bool
