from __future__ import annotations

import logging

from _infra import Failure, User, banner

from trying import Err, Ok, ReportPolicy, Warn, WarnResult, collect, downgrade, run, traverse

ROWS = [
    "1,ann,31",
    "2,bob, 45",
    "3,cid,",
    "4,dee,27",
]


def parse_row(line: int, row: str) -> WarnResult[User, Failure]:
    user_id, name, age = row.split(",")
    if not age.strip():
        return Err(Failure("missing age", line))
    if age != age.strip():
        return Warn(User(int(user_id), name, int(age)), Failure("stray whitespace", line))
    return Ok(User(int(user_id), name, int(age)))


def load(rows: list[str]) -> WarnResult[list[User], Failure]:
    # A single bad row fails the whole batch...
    strict = traverse(enumerate(rows, 1), lambda item: parse_row(*item))
    if strict.is_ok() or strict.is_warn():
        return strict

    # ...unless we settle for skipping it, which is still reported.
    lenient = collect(
        downgrade(parse_row(line, row), default=None, warning=lambda f: f)
        for line, row in enumerate(rows, 1)
    )
    return lenient.map_val(lambda users: [u for u in users if u is not None])


def main() -> WarnResult[list[User], Failure]:
    banner("02_batch_report: traverse + collect + run")
    outcome = load(ROWS)
    print(f"outcome: {outcome!r}")
    return outcome


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    run(main, policy=ReportPolicy(render=str))
