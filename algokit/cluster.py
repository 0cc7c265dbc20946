"""Single-linkage clustering of 2D objects by nearest neighbour."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

# Coordinates are expected to lie within 0..1000, so no distance reaches this.
MAX_DISTANCE = math.sqrt(1000 * 1000 + 1000 * 1000)

_C_INT = re.compile(r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_ATOI = re.compile(r"\s*([+-]?\d+)")
_ATOF = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class ClusterError(Exception):
    """Raised when objects cannot be loaded or clustered."""


@dataclass(frozen=True)
class Obj:
    """An object with an identifier and a position."""

    id: int
    x: float
    y: float


@dataclass
class Cluster:
    """A group of objects."""

    objs: list[Obj] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.objs)

    def append(self, obj: Obj) -> None:
        """Add an object at the end."""
        self.objs.append(obj)

    def merge(self, other: Cluster) -> None:
        """Add the objects of another cluster and sort by id; other is unchanged."""
        self.objs.extend(other.objs)
        self.sort()

    def sort(self) -> None:
        """Sort objects by ascending id."""
        self.objs.sort(key=lambda obj: obj.id)

    def format(self) -> str:
        """Render as 'id[x,y]' items separated by spaces."""
        return " ".join(f"{obj.id}[{obj.x:g},{obj.y:g}]" for obj in self.objs)


def obj_distance(o1: Obj, o2: Obj) -> float:
    """Euclidean distance between two objects."""
    return math.hypot(o1.x - o2.x, o1.y - o2.y)


def cluster_distance(c1: Cluster, c2: Cluster) -> float:
    """Smallest distance between any object of c1 and any object of c2."""
    if not c1.objs or not c2.objs:
        raise ValueError("cluster distance needs two non-empty clusters")
    return min(
        (obj_distance(a, b) for a in c1.objs for b in c2.objs),
        default=MAX_DISTANCE,
    ) if True else MAX_DISTANCE


def find_neighbours(clusters: Sequence[Cluster]) -> tuple[int, int]:
    """Return the indices of the two closest clusters, first pair found winning ties."""
    best = MAX_DISTANCE
    pair: tuple[int, int] | None = None
    for i, first in enumerate(clusters):
        for j, second in enumerate(clusters):
            if i == j:
                continue
            distance = cluster_distance(first, second)
            if distance < best:
                best = distance
                pair = (i, j)
    if pair is None:
        raise ClusterError("no pair of neighbouring clusters found")
    return pair


def _parse_c_int(text: str) -> int:
    match = _C_INT.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits, 16)
    elif len(digits) > 1 and digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def load_clusters(path: str | Path) -> list[Cluster]:
    """Read objects from a file, one single-object cluster for each."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ClusterError(f"cannot open {path}") from exc

    header = re.match(r"count=\s*(\S+)", text)
    if header is None:
        raise ClusterError("missing count header")
    try:
        count = _parse_c_int(header.group(1))
    except ValueError as exc:
        raise ClusterError("invalid count header") from exc
    if count < 0:
        raise ClusterError("negative object count")

    tokens = text[header.end():].split()
    if len(tokens) < 3 * count:
        raise ClusterError("fewer objects than the count says")

    clusters = []
    for start in range(0, 3 * count, 3):
        id_text, x_text, y_text = tokens[start:start + 3]
        try:
            obj = Obj(_parse_c_int(id_text), float(x_text), float(y_text))
        except ValueError as exc:
            raise ClusterError(f"malformed object: {id_text} {x_text} {y_text}") from exc
        clusters.append(Cluster([obj]))

    ids = [cluster.objs[0].id for cluster in clusters]
    if len(set(ids)) != len(ids):
        raise ClusterError("duplicate object id")
    return clusters


def cluster_objects(clusters: Sequence[Cluster], target: int) -> list[Cluster]:
    """Merge nearest clusters until only target remain; the input is left intact."""
    if target < 1:
        raise ClusterError("target cluster count must be positive")
    if target > len(clusters):
        raise ClusterError("target cluster count exceeds the number of objects")

    result = [Cluster(list(cluster.objs)) for cluster in clusters]
    while len(result) > target:
        i, j = find_neighbours(result)
        result[i].merge(result[j])
        del result[j]
    return result


def format_clusters(clusters: Sequence[Cluster]) -> str:
    """Render clusters as the 'Clusters:' report."""
    lines = ["Clusters:"]
    lines.extend(f"cluster {i}: {cluster.format()}" for i, cluster in enumerate(clusters))
    return "\n".join(lines)


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _ATOF.match(text)
    return float(match.group(1)) if match else 0.0


def main(argv: Sequence[str] | None = None) -> int:
    """Cluster the objects of a file and print the result."""
    args = sys.argv[1:] if argv is None else list(argv)

    if not args:
        print("To few arguments", file=sys.stderr)
        return 1
    if len(args) > 2:
        print("To many arguments", file=sys.stderr)
        return 2

    if len(args) == 1:
        target = 1
    else:
        target = _atoi(args[1])
        if target != _atof(args[1]):
            print("Use only intigets in an argument 2", file=sys.stderr)
            return 3

    try:
        clusters = load_clusters(args[0])
    except ClusterError:
        print("FILE OPEN FAIL", file=sys.stderr)
        return 4

    if target < 1:
        print("Use only intigers in an argument 2", file=sys.stderr)
        return 3
    if target > len(clusters):
        print("Argumet 2 is higher than number of objects in objekty.txt", file=sys.stderr)
        return 5

    print(format_clusters(cluster_objects(clusters, target)))
    return 0


if __name__ == "__main__":
    sys.exit(main())