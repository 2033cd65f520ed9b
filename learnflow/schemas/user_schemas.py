"""Pydantic schemas for accounts and per-user data."""

from datetime import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator

from learnflow.utils import normalize_email


class UserRegisterRequest(BaseModel):
    """Schema for user registration request."""

    email: str = Field(..., min_length=3, max_length=255, description="Email address")
    password: str = Field(..., min_length=8, max_length=128, description="Password")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field("", max_length=100)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        value = normalize_email(value)
        if "@" not in value:
            raise ValueError("Invalid email address")
        return value


class LoginRequest(BaseModel):
    """Schema for email/password login."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return normalize_email(value)


class GoogleLoginRequest(BaseModel):
    """Profile forwarded by the client after the Google OAuth callback."""

    email: str | None = None
    google_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    image: str | None = None


class User(BaseModel):
    """Public view of a user account."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str
    last_name: str
    profile_image_url: str | None = None
    is_admin: bool
    created_at: dt


class RegisterResponse(BaseModel):
    message: str
    user: User


class AuthResponse(BaseModel):
    """Returned by login endpoints; the token is also set as a cookie."""

    message: str
    user: User
    token: str


class MessageResponse(BaseModel):
    message: str


class SearchHistoryCreate(BaseModel):
    """Schema for recording a catalogue search."""

    search_query: str = Field(..., min_length=1)
    department: str | None = None
    resource_type: str | None = None
    semester: int | None = None
    year: int | None = None


class SearchHistory(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    search_query: str
    department: str | None
    resource_type: str | None
    semester: int | None
    year: int | None
    searched_at: dt


class UserProgress(BaseModel):
    """XP, level and streak counters."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int
    total_xp: int
    level: int
    current_streak: int
    longest_streak: int
    last_activity_date: dt | None
    total_study_time: int
    quizzes_completed: int
    quizzes_passed: int
    resources_completed: int
    certificates_earned: int
    weekly_xp: int
    monthly_xp: int


class XPRequest(BaseModel):
    xp_amount: int = Field(..., gt=0, description="XP to add")
    reason: str | None = Field(None, max_length=200)


class XPResponse(BaseModel):
    message: str
    total_xp: int
    level: int
    leveled_up: bool


class StreakResponse(BaseModel):
    current_streak: int
    longest_streak: int


class UserPreferences(BaseModel):
    """Onboarding answers and study settings."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    college: str
    course: str
    year: str
    interests: list[str]
    goals: list[str]
    daily_time: str
    preferred_time: str
    learning_style: str | None
    custom_interests: str
    custom_goals: str
    daily_goal_minutes: int
    weekly_goal_days: int
    notifications_enabled: bool
    email_digest_enabled: bool
    sound_enabled: bool
    difficulty_preference: str
    onboarding_completed: bool
    updated_at: dt


class UserPreferencesUpdate(BaseModel):
    """Partial update of preferences; omitted fields are left unchanged."""

    name: str | None = Field(None, max_length=200)
    college: str | None = Field(None, max_length=300)
    course: str | None = Field(None, max_length=300)
    year: str | None = Field(None, max_length=20)
    interests: list[str] | None = None
    goals: list[str] | None = None
    daily_time: str | None = Field(None, max_length=20)
    preferred_time: str | None = Field(None, max_length=20)
    learning_style: str | None = Field(None, max_length=20)
    custom_interests: str | None = None
    custom_goals: str | None = None
    daily_goal_minutes: int | None = Field(None, ge=1, le=1440)
    weekly_goal_days: int | None = Field(None, ge=1, le=7)
    notifications_enabled: bool | None = None
    email_digest_enabled: bool | None = None
    sound_enabled: bool | None = None
    difficulty_preference: str | None = Field(None, max_length=20)
    onboarding_completed: bool | None = None
