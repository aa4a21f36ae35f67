# level.py
# Level state: the static terrain grid, the moving actors and the win/lose
# state machine.
#
# Grid cells are "wall", "lava" or None. Rows may be ragged; a cell past the
# end of its row counts as empty.
#
# Status goes None -> "won" or None -> "lost" and then never changes again.
# After that, finish_delay counts down so the caller can keep animating for
# a moment before the level is finished.

from __future__ import annotations
import math

from . import settings
from .actor import Actor
from .errors import TypeArgumentError
from .vector import Vector


class Level:
    # --- Terrain kinds ---
    WALL = "wall"
    LAVA = "lava"

    # --- Status values (None while playing) ---
    WON = "won"
    LOST = "lost"

    def __init__(self, grid: list[list[str | None]] | None = None, actors: list[Actor] | None = None):
        self.grid = grid if grid is not None else []
        self.actors = actors if actors is not None else []

        # Resolved once; the player is never re-looked-up
        self.player = next((a for a in self.actors if a.type == "player"), None)

        self.height = len(self.grid)
        self.width = max((len(row) for row in self.grid), default=0)

        self.status: str | None = None
        self.finish_delay = settings.FINISH_DELAY

    def is_finished(self) -> bool:
        return self.status is not None and self.finish_delay < 0

    # --------------------------
    # Queries
    # --------------------------

    def actor_at(self, actor: Actor) -> Actor | None:
        """First actor (in list order) that overlaps `actor`, or None."""
        if not isinstance(actor, Actor):
            raise TypeArgumentError("Actor", actor)
        return next((other for other in self.actors if other.is_intersect(actor)), None)

    def obstacle_at(self, pos: Vector, size: Vector) -> str | None:
        """
        Terrain under the rectangle at `pos` with extent `size`.

        The field is walled on the left, top and right, and has lava below,
        so anything poking out of the grid is classified before the grid
        itself is looked at.
        """
        if not isinstance(pos, Vector):
            raise TypeArgumentError("Vector", pos)
        if not isinstance(size, Vector):
            raise TypeArgumentError("Vector", size)

        left = math.floor(pos.x)
        right = math.ceil(pos.x + size.x)
        top = math.floor(pos.y)
        bottom = math.ceil(pos.y + size.y)

        if left < 0 or right > self.width or top < 0:
            return self.WALL
        if bottom > self.height:
            return self.LAVA

        for y in range(top, bottom):
            row = self.grid[y]
            for x in range(left, right):
                cell = row[x] if x < len(row) else None
                if cell:
                    return cell
        return None

    def no_more_actors(self, actor_type: str) -> bool:
        return all(a.type != actor_type for a in self.actors)

    # --------------------------
    # Mutation
    # --------------------------

    def remove_actor(self, actor: Actor) -> None:
        for i, other in enumerate(self.actors):
            if other is actor:
                del self.actors[i]
                return

    def player_touched(self, touched: str | None, actor: Actor | None = None) -> None:
        """Apply one player contact (terrain kind or actor type) to the status."""
        if self.status is not None:
            return  # already won or lost

        if touched in (self.LAVA, "fireball"):
            self.status = self.LOST
            return

        if touched == "coin" and actor is not None and actor.type == "coin":
            self.remove_actor(actor)
            if self.no_more_actors("coin"):
                self.status = self.WON

    def resolve_contacts(self) -> None:
        """Check the player against terrain, then against the other actors."""
        player = self.player
        if player is None:
            return

        obstacle = self.obstacle_at(player.pos, player.size)
        if obstacle:
            self.player_touched(obstacle)

        other = self.actor_at(player)
        if other is not None:
            self.player_touched(other.type, other)

    # --------------------------
    # Update
    # --------------------------

    def act(self, time: float) -> None:
        """One tick: move every actor, then resolve the player's contacts."""
        if self.is_finished():
            return

        # Snapshot: contacts may remove actors
        for actor in list(self.actors):
            actor.act(time, self)

        self.resolve_contacts()

        if self.status is not None:
            self.finish_delay -= time

    def step(self, time: float, max_step: float = settings.MAX_STEP) -> None:
        """Run `time` seconds of simulation in ticks no longer than `max_step`."""
        while time > 0 and not self.is_finished():
            tick = min(time, max_step)
            self.act(tick)
            time -= tick
