"""Nearest greater and smaller neighbours found with a monotonic stack."""

from __future__ import annotations

from collections.abc import Sequence

NOT_FOUND = -1


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """For each value, the first strictly greater value to its right, or -1."""
    result = [NOT_FOUND] * len(nums)
    waiting: list[int] = []
    for index, value in enumerate(nums):
        while waiting and value > nums[waiting[-1]]:
            result[waiting.pop()] = value
        waiting.append(index)
    return result


def previous_smaller_elements(nums: Sequence[int]) -> list[int]:
    """For each value, the nearest strictly smaller value to its left, or -1."""
    result: list[int] = []
    stack: list[int] = []
    for value in nums:
        while stack and value <= stack[-1]:
            stack.pop()
        result.append(stack[-1] if stack else NOT_FOUND)
        stack.append(value)
    return result