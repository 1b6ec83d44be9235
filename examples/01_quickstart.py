from __future__ import annotations

from _infra import Failure, FakeDirectory, User, banner

from trying import Err, Ok, Warn, WarnResult, propagate, propagating
from trying import lift as L


def parse_age(raw: str) -> WarnResult[int, Failure]:
    # Locality: plain function returning WarnResult, nothing else here.
    age = L.catching(lambda: int(raw), on_error=lambda e: Failure(f"bad age {raw!r}"))
    return age.and_then(
        lambda m: Warn(150, Failure(f"age {m.value} clamped to 150")) if m.value > 150 else Ok(m.value)
    )


@propagating
def make_user(directory: FakeDirectory, user_id: int, name: str, age: str) -> WarnResult[User, Failure]:
    free_name = propagate(directory.check(name))   # kungfu Result: value or early return
    checked_age = propagate(parse_age(age))        # WarnResult: MaybeWarn or early return
    return WarnResult.from_maybe(checked_age.map(lambda a: User(user_id, free_name, a)))


def main() -> None:
    banner("01_quickstart: propagate + @propagating")

    directory = FakeDirectory("root")

    for args in [(1, "ann", "31"), (2, "bob", "999"), (3, "root", "40"), (4, "eve", "?")]:
        match make_user(directory, *args):
            case Ok(user):
                print(f"ok: {user}")
            case Warn(user, warning):
                print(f"ok: {user} (warning: {warning})")
            case Err(error):
                print(f"error: {error}")


if __name__ == "__main__":
    main()
