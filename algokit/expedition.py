"""Fewest refuelling stops for a truck driving to a town."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterable
from typing import Optional


def min_refuel_stops(
    stations: Iterable[tuple[int, int]], distance: int, fuel: int
) -> Optional[int]:
    """Return the fewest stops needed to reach the town, or None if impossible.

    Each station is ``(distance_to_town, fuel_available)``; the truck starts
    ``distance`` units from the town with ``fuel`` units, one unit per distance.
    """
    positions = []
    for to_town, amount in stations:
        if not 0 <= to_town <= distance:
            raise ValueError("station must lie between the truck and the town")
        positions.append((distance - to_town, amount))
    positions.sort(key=lambda item: item[0])

    available: list[int] = []
    stops = 0
    previous = 0

    def reach(leg: int) -> bool:
        nonlocal fuel, stops
        while fuel < leg:
            if not available:
                return False
            fuel += -heapq.heappop(available)
            stops += 1
        fuel -= leg
        return True

    for position, amount in positions:
        if not reach(position - previous):
            return None
        heapq.heappush(available, -amount)
        previous = position
    if not reach(distance - previous):
        return None
    return stops


def main(argv: Optional[list[str]] = None) -> int:
    """Read test cases from standard input and print the stops for each."""
    parser = argparse.ArgumentParser(description="Fewest refuelling stops.")
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        cases = int(next(tokens))
        for _ in range(cases):
            count = int(next(tokens))
            stations = [(int(next(tokens)), int(next(tokens))) for _ in range(count)]
            distance = int(next(tokens))
            fuel = int(next(tokens))
            answer = min_refuel_stops(stations, distance, fuel)
            print(-1 if answer is None else answer)
    except StopIteration:
        print("unexpected end of input", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())