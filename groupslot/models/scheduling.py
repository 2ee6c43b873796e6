from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

UserType = Literal[
    "office-worker",
    "university-student",
    "high-school-student",
    "middle-school-student",
    "custom",
]

ParticipantStatus = Literal["invited", "editing", "submitted"]

# "YYYY-MM-DD-HH-MM"
SlotKey = str


def true_only(availability) -> dict[str, bool]:
    # absence means unavailable; explicit false entries are not kept
    if not availability:
        return {}
    return {k: True for k, flag in dict(availability).items() if flag is True}


class TimeSlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: SlotKey
    date: str
    hour: int
    minute: int

    @computed_field
    @property
    def display(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


class Participant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    user_type: UserType = "custom"
    availability: dict[SlotKey, bool] = Field(default_factory=dict)
    submitted: bool = False

    @field_validator("availability", mode="before")
    @classmethod
    def keep_true_only(cls, v):
        return true_only(v)

    @computed_field
    @property
    def status(self) -> ParticipantStatus:
        if self.submitted:
            return "submitted"
        if not self.availability:
            return "invited"
        return "editing"


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    start_date: str
    end_date: str
    created_at: str
    participants: list[Participant] = Field(default_factory=list)


class Tier(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Literal["perfect", "good", "ok"]
    label: str
    color_weight: int
    slots: list[TimeSlot]


class ConfirmedMeeting(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    time: str
    duration: float
    location: str | None = None
    notes: str | None = None

    @computed_field
    @property
    def end_time(self) -> str:
        from groupslot.scheduling.timegrid import end_time

        return end_time(self.time, self.duration)
