from hypothesis import given
from hypothesis import strategies as st

from dsakit.monotonic import next_greater_elements, previous_smaller_elements

_values = st.lists(st.integers(min_value=0, max_value=50), max_size=30)


def test_next_greater_example():
    assert next_greater_elements([2, 1, 5, 6, 2, 3]) == [5, 5, 6, -1, 3, -1]


def test_previous_smaller_example():
    assert previous_smaller_elements([4, 5, 2, 10, 8]) == [-1, 4, -1, 2, 2]


def test_empty_input():
    assert next_greater_elements([]) == []
    assert previous_smaller_elements([]) == []


def test_non_increasing_has_no_greater():
    assert next_greater_elements([9, 7, 7, 3]) == [-1, -1, -1, -1]


def test_non_decreasing_has_no_previous_smaller_equal_runs():
    assert previous_smaller_elements([5, 5, 5]) == [-1, -1, -1]


def test_increasing_previous_smaller_is_predecessor():
    nums = [1, 3, 8, 20]
    assert previous_smaller_elements(nums) == [-1, *nums[:-1]]


@given(_values)
def test_next_greater_invariants(nums):
    result = next_greater_elements(nums)
    assert len(result) == len(nums)
    for i, found in enumerate(result):
        later = nums[i + 1 :]
        if found == -1:
            assert all(x <= nums[i] for x in later)
        else:
            assert found > nums[i]
            first = next(j for j, x in enumerate(later) if x > nums[i])
            assert later[first] == found


@given(_values)
def test_previous_smaller_invariants(nums):
    result = previous_smaller_elements(nums)
    assert len(result) == len(nums)
    for i, found in enumerate(result):
        earlier = nums[:i]
        if found == -1:
            assert all(x >= nums[i] for x in earlier)
        else:
            assert found < nums[i]
            nearest = next(x for x in reversed(earlier) if x < nums[i])
            assert nearest == found