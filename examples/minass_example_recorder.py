"""Running assertions outside a test runner with a Recorder.

Run with ``python examples/minass_example_recorder.py``.
"""

from rich.console import Console

from minass import Recorder, assert_fn, assert_that


def main() -> int:
    console = Console()
    rec = Recorder()

    assert_that(rec, ["got"]).equals("wanted")
    assert_that(rec, {"gotKey": "got"}).has_key("wantedKey", "looking up %s", "wantedKey")
    assert_that(rec, "value").nil()
    assert_fn(rec, lambda: None).panic()

    for failure in rec.failures:
        console.print(failure, markup=False, highlight=False)
        console.rule()

    console.print(f"{len(rec.failures)} failed checks")
    return 1 if rec.failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
