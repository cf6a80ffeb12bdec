"""
Stale cache — show cached data while a refresh is in flight.

Key concepts:
- Engine  = runs the producer, owns raw state (pending/complete/reloading)
- Marker  = outdated flag, shareable with any callback
- Cache   = composes both into EMPTY/READY/ERROR/OUTDATED/RELOADING
"""

from kungfu import Ok, Error

from stalecache import Scope, StaleCache, FutureState, StartupGuard
from stalecache import lift as L
from examples._infra import banner, run, UserId, Profile, NotFound, FakeApi


api = FakeApi()


# ═══════════════════════════════════════════════════════════════════════════════
# 1. PRODUCER — deps in, LazyCoroResult out
# ═══════════════════════════════════════════════════════════════════════════════

load_profile = L.producer(
    api.get_profile,
    on_error=lambda e: e if isinstance(e, NotFound) else NotFound("Profile", "?"),
)


def render(profile: StaleCache[Profile, object]) -> None:
    state = profile.check_state()
    strict = profile.read()
    lenient = profile.read(allow_cache_while_reloading=True)
    shown = strict or lenient
    suffix = "" if strict else " (stale)" if shown else ""
    label = f"{shown.name}, {shown.orders} orders{suffix}" if shown else "—"
    print(f"   [{state.name:<9}] {label}")


async def main() -> None:
    banner("Stale cache: stale-while-revalidate in a component")

    async with Scope() as cx:
        profile = cx.hook(load_profile).depends_on(UserId(1)).build()

        print("\n1. First render (nothing loaded yet):")
        render(profile)

        await profile.engine.settled()
        print("\n2. Producer finished:")
        render(profile)

        # 2. Another part of the tree invalidates through the marker only
        marker = profile.outdated_marker

        async def place_order() -> None:
            await api.place_order(UserId(1))
            marker.mark()

        print("\n3. Order placed elsewhere, profile marked outdated:")
        await place_order()
        render(profile)

        print("\n4. fetch() — refresh because it is outdated:")
        profile.fetch()
        render(profile)
        await profile.engine.settled()
        render(profile)

        print("\n5. fetch() again — fresh, nothing happens:")
        print(f"   restarted={profile.fetch()}")

    banner("Missing profile, startup guard enabled")

    async with Scope() as cx:
        missing = (
            cx.hook(load_profile)
            .depends_on(UserId(404))
            .startup(StartupGuard.ENABLE)
            .build()
        )
        await missing.engine.settled()
        print(f"   state={missing.check_state().name}")
        match missing.read_unchecked():
            case Ok(p):
                print(f"   unexpected: {p}")
            case Error(e):
                print(f"   raw error: {e}")
            case None:
                print("   nothing yet")

        missing.fetch()
        await missing.engine.settled()
        assert missing.check_state() is FutureState.ERROR
        print(f"   after fetch: {missing.check_state().name}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
