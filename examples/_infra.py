"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field


# Types
@dataclass(frozen=True, slots=True)
class UserId:
    value: int


@dataclass(frozen=True, slots=True)
class Profile:
    id: UserId
    name: str
    orders: int = 0


# Errors
@dataclass(frozen=True, slots=True)
class NotFound(Exception):
    entity: str
    id: int | str

    def __str__(self) -> str:
        return f"{self.entity}:{self.id} not found"


# Fake API
@dataclass(slots=True)
class FakeApi:
    profiles: dict[int, Profile] = field(default_factory=lambda: {
        1: Profile(UserId(1), "Alice"),
        2: Profile(UserId(2), "Bob"),
    })

    async def get_profile(self, user_id: UserId) -> Profile:
        await asyncio.sleep(0.01)
        profile = self.profiles.get(user_id.value)
        if profile is None:
            raise NotFound("Profile", user_id.value)
        return profile

    async def place_order(self, user_id: UserId) -> None:
        await asyncio.sleep(0.01)
        p = self.profiles[user_id.value]
        self.profiles[user_id.value] = Profile(p.id, p.name, p.orders + 1)


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
