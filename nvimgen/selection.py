# nvimgen Selection Model
# The user's full configuration choice consumed by the generator

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nvimgen.resolve.settings import default_settings

LEADER_ALIASES: dict[str, str] = {
    "space": " ",
    "<space>": " ",
    "spc": " ",
}


def _dedupe(values: list[str]) -> list[str]:
    result: list[str] = []
    for value in values:
        value = value.strip()
        if value and value not in result:
            result.append(value)
    return result


class Selection(BaseModel):
    """
    Immutable root aggregate of a configuration.

    Every change produces a new Selection via `evolve`.
    """

    model_config = ConfigDict(frozen=True)

    languages: list[str] = Field(default_factory=list, description="Language ids, unique, in selection order")
    theme: str = Field(default="", description="Theme id, empty for no override")
    plugins: list[str] = Field(default_factory=list, description="Built-in and custom-<slug> plugin ids")
    flags: list[str] = Field(default_factory=list, description="Legacy boolean setting flags")
    settings: dict[str, Any] = Field(default_factory=default_settings, description="Structured settings object")
    leader_key: str = Field(default=" ", description="Single leader character")
    keymaps: dict[str, str] = Field(default_factory=dict, description="Action id to chord overrides")
    custom_plugins: dict[str, str] = Field(
        default_factory=dict, description="Custom plugin id to owner/repo"
    )

    @field_validator("languages", "plugins", "flags")
    @classmethod
    def unique_ids(cls, v: list[str]) -> list[str]:
        """Drop blanks and duplicates, keeping first occurrence."""
        return _dedupe(v)

    @field_validator("theme")
    @classmethod
    def strip_theme(cls, v: str | None) -> str:
        return (v or "").strip()

    @field_validator("leader_key", mode="before")
    @classmethod
    def single_character(cls, v: Any) -> str:
        """Accept a single character or a space alias."""
        if v is None or v == "":
            return " "
        value = str(v)
        value = LEADER_ALIASES.get(value.lower(), value)
        if len(value) != 1:
            raise ValueError(f"Leader key must be a single character, got {value!r}")
        return value

    def evolve(self, **updates: Any) -> "Selection":
        """
        Return a validated copy with the given fields replaced.

        Args:
            **updates: Field values to replace.

        Returns:
            New Selection; this one is left untouched.
        """
        data = self.model_dump()
        data.update(updates)
        return Selection.model_validate(data)

    @property
    def leader_display(self) -> str:
        """Human readable leader key."""
        return "Space" if self.leader_key == " " else self.leader_key
