from dataclasses import dataclass
from typing import List, Optional, Iterable, TypeAlias
from pathlib import Path

import jsonlines

from vowel_spread.distribution import TestCase
from vowel_spread.utils import DatasetFailure


@dataclass
class Task:
    id: str
    test_case: TestCase
    expected: Optional[str] = None


Dataset: TypeAlias = List[Task]


def dataset_from_test_cases(test_cases: Iterable[TestCase]) -> Dataset:
    return [Task(t.hash_id(), t) for t in test_cases]


def load_dataset(file: Path) -> Dataset:
    '''Schema (one object per line):
    {
       "id": "...",          # optional, defaults to the hash of the test case
       "n": 7,
       "expected": "..."     # optional
    }
    '''
    tasks: Dataset = []
    with jsonlines.open(file) as reader:
        for i, record in enumerate(reader, start=1):
            if "n" not in record:
                raise DatasetFailure(f"record {i} has no 'n'")
            n = record["n"]
            if isinstance(n, bool) or not isinstance(n, int) or n < 0:
                raise DatasetFailure(f"record {i} has invalid 'n': {n!r}")
            expected = record.get("expected")
            if expected is not None and not isinstance(expected, str):
                raise DatasetFailure(f"record {i} has invalid 'expected': {expected!r}")
            test_case = TestCase(n)
            tasks.append(Task(
                id=str(record.get("id", test_case.hash_id())),
                test_case=test_case,
                expected=expected
            ))
    return tasks


def save_dataset(dataset: Dataset, file: Path):
    data = []
    for task in dataset:
        task_dict = {
            "id": task.id,
            "n": task.test_case.n
        }
        if task.expected is not None:
            task_dict["expected"] = task.expected
        data.append(task_dict)

    with jsonlines.open(file, mode='w', flush=True) as writer:
        writer.write_all(data)
