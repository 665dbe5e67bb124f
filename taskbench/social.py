"""Friendship chains and common friends in a small social graph."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Sequence


@dataclass(frozen=True)
class User:
    """A user with the ids of their friends."""

    id: int
    name: str
    friends: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "friends", tuple(self.friends))


SAMPLE_USERS = (
    User(1, "Maxim", (2, 3)),
    User(2, "Vasya", (1, 3, 4)),
    User(3, "Vova", (1, 2, 4)),
    User(4, "Egor", (2, 3, 5)),
    User(5, "Nikita", (4,)),
)


def find_user(users: Iterable[User], user_id: int) -> User | None:
    """Return the first user with the given id, or None."""
    return next((user for user in users if user.id == user_id), None)


def shortest_chain(users: Sequence[User], user_from: int, user_to: int) -> list[int]:
    """Return the shortest chain of ids linking two users, or [] if none exists."""
    if user_from == user_to:
        return [user_from]

    by_id: dict[int, User] = {}
    for user in users:
        by_id.setdefault(user.id, user)

    parents: dict[int, int] = {}
    visited = {user_from}
    wave = [user_from]
    while wave and user_to not in parents:
        next_wave = []
        for current in wave:
            user = by_id.get(current)
            if user is None:
                continue
            for friend in user.friends:
                if friend not in visited:
                    visited.add(friend)
                    parents[friend] = current
                    next_wave.append(friend)
        wave = next_wave

    if user_to not in parents:
        return []
    path = [user_to]
    while path[-1] != user_from:
        path.append(parents[path[-1]])
    path.reverse()
    return path


def max_common_friends(users: Sequence[User]) -> tuple[int, int, list[int]] | None:
    """Return the first pair of users sharing the most friends, with those friends.

    Returns None when there are fewer than two users.
    """
    best: tuple[int, int, list[int]] | None = None
    for first, second in combinations(users, 2):
        common = sorted(set(first.friends) & set(second.friends))
        if best is None or len(common) > len(best[2]):
            best = (first.id, second.id, common)
    return best


def _label(users: Sequence[User], user_id: int) -> str:
    user = find_user(users, user_id)
    return user.name if user is not None else str(user_id)


def demo() -> None:
    """Print a chain and the best common-friends pair for the sample users."""
    users = SAMPLE_USERS
    print("Введите id двух пользователей для поиска цепочки: ", end="")
    chain = shortest_chain(users, 4, 1)
    if not chain:
        print("Цепочка не найдена.")
    else:
        print("Кратчайшая цепочка: " + " -> ".join(_label(users, uid) for uid in chain))

    pair = max_common_friends(users)
    if pair is not None:
        first, second, common = pair
        print(
            f"Пара с максимальным числом общих друзей: {_label(users, first)} и "
            f"{_label(users, second)} (общих: {len(common)}): "
            + "".join(f"{_label(users, fid)} " for fid in common)
        )