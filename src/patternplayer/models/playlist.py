"""Playlist tree: songs as leaves, playlists as containers.

A playlist owns its children in insertion order. Trees are built top-down
and never share a child between two parents, so no back-references or
cycle checks are kept.
"""

from typing import Annotated, Literal, Union

import click
from pydantic import BaseModel, Field

from patternplayer.protocols import Emitter


class Song(BaseModel):
    """A single track (leaf node)."""

    kind: Literal["song"] = "song"
    name: str = Field(description="Track name, usually the media file name")

    def show_details(self, emit: Emitter = click.echo) -> None:
        emit(f"Song: {self.name}")


class Playlist(BaseModel):
    """A named, ordered collection of songs and nested playlists."""

    kind: Literal["playlist"] = "playlist"
    name: str = Field(description="Playlist name")
    components: list[Annotated[Union[Song, "Playlist"], Field(discriminator="kind")]] = Field(
        default_factory=list,
        description="Children in play order",
    )

    def add(self, component: "Song | Playlist") -> "Playlist":
        """
        Append a child to the end of this playlist.

        Args:
            component: Song or Playlist to append

        Returns:
            This playlist, so additions can be chained
        """
        self.components.append(component)
        return self

    def show_details(self, emit: Emitter = click.echo) -> None:
        """Print this playlist's name, then each child depth-first."""
        emit(f"Playlist: {self.name}")
        for component in self.components:
            component.show_details(emit)


Playlist.model_rebuild()
