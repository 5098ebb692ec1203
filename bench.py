from __future__ import annotations

import timeit

import polars as pl

from pydiverse.collections import CollectionMap, CollectionSet

NUMBER = 20_000
BIG = CollectionMap({f"key-{i}": i for i in range(10_000)})


def compute():
    m = CollectionMap()
    m.compute("Key", lambda _key, value: 0 if value is None else value + 1)
    m.compute("Key", lambda _key, value: 0 if value is None else value + 1)
    m.compute("Key", lambda _key, value: 0 if value != 1 else None)


def compute_baseline():
    m = {}
    if "Key" not in m:
        m["Key"] = 0
    v = m.get("Key")
    if v is not None:
        m["Key"] = v + 1
    if "Key" in m:
        del m["Key"]


def compute_if_absent():
    m = CollectionMap()
    m.compute_if_absent("Key", lambda _key: 1)
    m.compute_if_absent("Key", lambda _key: 1)
    m.compute_if_absent("Key1", lambda _key: None)


def compute_if_absent_baseline():
    m = {}
    if "Key" not in m:
        m["Key"] = 1
    if "Key" not in m:
        m["Key"] = 1
    m.get("Key1")


def compute_if_present():
    m = CollectionMap({"Key": 1})
    m.compute_if_present("Key", lambda _key, value: value + 1)
    m.compute_if_present("Key", lambda _key, value: None if value == 2 else value)
    m.compute_if_present("Key1", lambda _key, value: 1)


def compute_if_present_baseline():
    m = {"Key": 1}
    if "Key" in m:
        m["Key"] += 1
    if "Key" in m and m["Key"] == 2:
        del m["Key"]
    m.get("Key1")


def compute_if():
    m = CollectionMap({"Key": 1})
    m.compute_if("Key", present=lambda _k, v: v + 1, absent=lambda _k: None)
    m.compute_if("Key-1", present=lambda _k, v: v + 1, absent=lambda _k: 1)
    m.compute_if(
        "Key", present=lambda _k, v: None if v == 2 else v, absent=lambda _k: None
    )


def compute_if_baseline():
    m = {"Key": 1}
    if "Key" in m:
        m["Key"] += 1
    if "Key-1" not in m:
        m["Key-1"] = 1
    if "Key" in m and m["Key"] == 2:
        del m["Key"]


def has_value():
    BIG.has_value(9_999)
    BIG.has_value(100_001)


def has_value_baseline():
    for v in BIG.values():
        if v == 9_999:
            break
    for v in BIG.values():
        if v == 100_001:
            break


def merge():
    m = CollectionMap()
    for _ in range(3):
        m.merge("Key", 1, lambda old, new: None if old > 1 else old + new)


def merge_baseline():
    m = {}
    for _ in range(3):
        v = m.get("Key")
        n = 1 if v is None else None if v > 1 else v + 1
        if n is None:
            m.pop("Key", None)
        else:
            m["Key"] = n


def union():
    CollectionSet(["key"]).union(CollectionSet(["key-2"]))


def union_baseline():
    s = set(["key"])
    new = set(s)
    for v in {"key-2"}:
        new.add(v)


GROUPS = {
    "compute": (compute, compute_baseline),
    "compute_if_absent": (compute_if_absent, compute_if_absent_baseline),
    "compute_if_present": (compute_if_present, compute_if_present_baseline),
    "compute_if": (compute_if, compute_if_baseline),
    "has_value": (has_value, has_value_baseline),
    "merge": (merge, merge_baseline),
    "union": (union, union_baseline),
}


def run(number: int = NUMBER) -> pl.DataFrame:
    rows = []
    for group, (fn, baseline) in GROUPS.items():
        # the linear scans are far slower than the single-entry operations
        n = number // 100 if group == "has_value" else number
        rows.append(
            {
                "group": group,
                "us_per_call": timeit.timeit(fn, number=n) / n * 1e6,
                "baseline_us_per_call": timeit.timeit(baseline, number=n) / n * 1e6,
            }
        )

    return pl.DataFrame(rows).with_columns(
        ratio=pl.col("us_per_call") / pl.col("baseline_us_per_call")
    )


if __name__ == "__main__":
    with pl.Config(tbl_rows=-1, float_precision=3):
        print(run())
