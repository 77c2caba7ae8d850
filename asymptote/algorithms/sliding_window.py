"""Sliding window algorithms over strings and arrays.

  1. Longest substring without repeating characters: given a string, find the length of the
     longest substring without duplicate characters. Solved both by the sliding window (linear)
     and by the brute force (checking all the substrings).
  2. Maximum sum of subarray of size k: given an array and a number k, find the maximum sum of
     any continuous subarray of size k.
"""
from __future__ import annotations

# Standard Imports
from typing import Optional

# Third-Party Imports

# Asymptote Imports


def length_of_longest_substring(text: str) -> int:
    """Finds the length of the longest substring without repeating characters

    The window is extended by the right pointer; whenever the new character is already in the
    window, the window is shrunk from the left until the duplicate is removed.

    :param str text: searched string
    :return: length of the longest substring with unique characters
    """
    window: set[str] = set()
    max_length = 0
    left = 0

    for right, char in enumerate(text):
        while char in window:
            window.remove(text[left])
            left += 1
        window.add(char)
        max_length = max(max_length, right - left + 1)

    return max_length


def length_of_longest_substring_brute_force(text: str) -> int:
    """Finds the length of the longest substring without repeating characters by checking all of
    the substrings

    :param str text: searched string
    :return: length of the longest substring with unique characters
    """
    max_length = 0

    for i in range(len(text)):
        for j in range(i, len(text)):
            substring = text[i : j + 1]
            if _all_unique(substring):
                max_length = max(max_length, len(substring))

    return max_length


def _all_unique(substring: str) -> bool:
    """
    :param str substring: checked string
    :return: true if no character is repeated in the string
    """
    seen: set[str] = set()
    for char in substring:
        if char in seen:
            return False
        seen.add(char)
    return True


def maximum_sum_of_subarray_of_size_k(arr: list[int], k: int) -> Optional[int]:
    """Finds the maximum sum of continuous subarray of size k

    :param list arr: array of integers
    :param int k: size of the subarray
    :return: maximum sum of the subarray, or None if the array is empty, shorter than k or k is
        not positive
    """
    if not arr or k < 1 or k > len(arr):
        return None

    window_sum = sum(arr[:k])
    max_sum = window_sum

    for right in range(k, len(arr)):
        window_sum += arr[right] - arr[right - k]
        max_sum = max(max_sum, window_sum)

    return max_sum
