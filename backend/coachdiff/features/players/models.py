"""Riot account and summoner value objects."""

from pydantic import BaseModel, ConfigDict, Field

from coachdiff.core.types import NonBlankStr, PUUIDField


class RiotAccount(BaseModel):
    """A Riot Games account.

    The PUUID never changes, even when the player renames the account, and is
    shared across every Riot title. The Riot ID (``gameName#tagLine``) is the
    human-facing handle.
    """

    puuid: PUUIDField
    game_name: NonBlankStr = Field(..., alias="gameName")
    tag_line: NonBlankStr = Field(..., alias="tagLine")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def full_riot_id(self) -> str:
        """Riot ID in the ``gameName#tagLine`` format."""
        return f"{self.game_name}#{self.tag_line}"


class Summoner(BaseModel):
    """A League of Legends summoner on one platform."""

    summoner_id: NonBlankStr = Field(..., alias="id")
    puuid: PUUIDField
    profile_icon_id: int = Field(0, alias="profileIconId")
    summoner_level: int = Field(..., ge=1, alias="summonerLevel")
    revision_date: int = Field(0, alias="revisionDate")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
