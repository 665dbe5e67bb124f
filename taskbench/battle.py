"""Turn-based team battle where each fighter hits the weakest enemy."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from operator import attrgetter
from typing import Iterable


@dataclass
class Player:
    """A fighter with hit points, attack strength and a team number."""

    name: str
    hp: int
    attack: int
    team: int

    def alive(self) -> bool:
        """Whether the player still has hit points."""
        return self.hp > 0


@dataclass(frozen=True)
class LogEntry:
    """One attack made during the battle."""

    attacker: str
    target: str
    damage: int
    attacker_team: int


@dataclass
class BattleResult:
    """Outcome of a battle: winning team, attack log and final player states."""

    winner: int | None
    log: list[LogEntry] = field(default_factory=list)
    players: list[Player] = field(default_factory=list)

    def damage_by_team(self, team: int) -> int:
        """Total damage dealt by members of a team."""
        return sum(entry.damage for entry in self.log if entry.attacker_team == team)


SAMPLE_PLAYERS = (
    Player("Egor", 60, 10, 1),
    Player("Vasya", 50, 15, 1),
    Player("Kiril", 55, 12, 1),
    Player("Vlad", 65, 13, 2),
    Player("Petya", 45, 18, 2),
    Player("Anya", 70, 9, 2),
)


def simulate_battle(players: Iterable[Player]) -> BattleResult:
    """Fight until one team is left; the given players are not modified.

    In each round every living player, in order, hits the living enemy with
    the fewest hit points (the first such on ties). Raises ValueError when two
    teams remain but no living player can deal damage.
    """
    fighters = [replace(p) for p in players]
    log: list[LogEntry] = []

    while len({p.team for p in fighters if p.alive()}) > 1:
        if not any(p.alive() and p.attack > 0 for p in fighters):
            raise ValueError("no living player can deal damage; the battle would never end")
        for attacker in fighters:
            if not attacker.alive():
                continue
            enemies = [p for p in fighters if p.team != attacker.team and p.alive()]
            if not enemies:
                break
            target = min(enemies, key=attrgetter("hp"))
            target.hp = max(target.hp - attacker.attack, 0)
            log.append(LogEntry(attacker.name, target.name, attacker.attack, attacker.team))

    winner = next((p.team for p in fighters if p.alive()), None)
    return BattleResult(winner, log, fighters)


def demo() -> None:
    """Run the sample battle and print the winner, damage totals and log."""
    result = simulate_battle(SAMPLE_PLAYERS)
    winner = result.winner if result.winner is not None else -1
    print(f"\nБитва завершена! Победила команда {winner}\n")
    print("Статистика по урону:")
    for team in (1, 2):
        print(f"Команда {team}: {result.damage_by_team(team)} урона")
    print("\nИстория атак:")
    for entry in result.log:
        print(
            f"{entry.attacker} (Team {entry.attacker_team}) -> "
            f"{entry.target} : {entry.damage} урона"
        )