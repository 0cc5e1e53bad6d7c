import argparse
import json
import sys
from pathlib import Path

from vowel_spread.checker import check_line, Pass, Fail
from vowel_spread.dataset import load_dataset
from vowel_spread.distribution import distribute, render
from vowel_spread.metrics import summarize, pass_rate
from vowel_spread.utils import (
    DatasetFailure,
    print_annotated_hr,
    print_legend,
    print_marker,
    panic
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--dataset",
        type=str,
        required=True,
        help="JSON Lines file containing the test cases."
    )
    parser.add_argument(
        "--task",
        type=str,
        help="Identifier of task to run (all by default)."
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug messages."
    )
    return parser.parse_args(argv)


def evaluate_task(task):
    counts = distribute(task.test_case.n)
    line = render(counts)
    outcome = check_line(task.test_case.n, line)
    if isinstance(outcome, Pass) and task.expected is not None and line != task.expected:
        outcome = Fail(f"output '{line}' differs from expected '{task.expected}'")
    return counts, outcome


def evaluate_dataset(dataset, debug=False):
    """Schema:
    {
      "num_tasks": ...,
      "num_passed": ...,
      "pass_rate": ...,
      "failures": [ { "id": ..., "reason": ... }, ... ],
      "metrics": { ... }
    }
    """
    batch = []
    failures = []
    for task in dataset:
        counts, outcome = evaluate_task(task)
        batch.append(counts)
        match outcome:
            case Pass():
                print_marker(".")
            case Fail(reason):
                print_marker("!")
                failures.append({"id": task.id, "reason": reason})
                if debug:
                    print(f"\n{task.id}: {reason}", file=sys.stderr, flush=True)
    print(file=sys.stderr, flush=True)

    num_passed = len(dataset) - len(failures)
    return {
        "num_tasks": len(dataset),
        "num_passed": num_passed,
        "pass_rate": pass_rate(len(dataset), num_passed),
        "failures": failures,
        "metrics": summarize(batch)
    }


def main(argv=None):
    args = parse_args(argv)

    try:
        dataset = load_dataset(Path(args.dataset))
    except DatasetFailure as e:
        panic(f"invalid dataset: {e}")

    if args.task:
        dataset = [t for t in dataset if t.id == args.task]
        if len(dataset) == 0:
            panic(f"task {args.task} not found")

    print_legend()
    print_annotated_hr(f"Dataset {args.dataset}")
    report = evaluate_dataset(dataset, debug=args.debug)
    print_annotated_hr("Summary")
    print(json.dumps(report, indent=2))

    if len(report["failures"]) > 0:
        sys.exit(1)


if __name__ == "__main__":
    main()
