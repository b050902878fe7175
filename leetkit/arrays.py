"""Algorithms over integer sequences and grids."""

from __future__ import annotations

from typing import Sequence

_INITIAL_MIN_PRICE = 1_000_000


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell, or 0."""
    min_price = _INITIAL_MIN_PRICE
    best = 0
    for price in prices:
        min_price = min(min_price, price)
        best = max(best, price - min_price)
    return best


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in ascending ``nums``, or -1 when absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right -= 1
    return -1


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of the first pair summing to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def flood_fill(image: list[list[int]], sr: int, sc: int, color: int) -> list[list[int]]:
    """Recolour the 4-connected region around (sr, sc) in place and return the image."""
    starting_color = image[sr][sc]
    if starting_color == color:
        return image
    rows = len(image)
    cols = len(image[0])
    stack = [(sr, sc)]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < rows and 0 <= c < cols):
            continue
        if image[r][c] != starting_color:
            continue
        image[r][c] = color
        stack.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
    return image