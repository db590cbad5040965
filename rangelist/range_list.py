# The MIT License (MIT)
#
# Copyright (c) 2020-2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.
#
# This file contains APIs for maintaining sorted lists
# of half-open integer ranges.

import logging

from rangelist.common.error import InvalidArgumentError, OutOfBoundsError
import rangelist.common.printers as PR

logger = logging.getLogger(__name__)

def _check_range(rg):
  """Verifies that range is a pair of integers [begin, end]."""

  if not isinstance(rg, (list, tuple)):
    raise InvalidArgumentError(f"range must be a list or tuple: {rg!r}")
  if len(rg) != 2:
    raise InvalidArgumentError(f"range must have exactly 2 elements: {rg!r}")
  for what, x in zip(('begin', 'end'), rg):
    # bool is a subclass of int but is not a valid endpoint
    if not isinstance(x, int) or isinstance(x, bool):
      raise InvalidArgumentError(f"{what} of range must be integer: {x!r}")
  if rg[0] > rg[1]:
    raise InvalidArgumentError(f"begin of range exceeds its end: {rg!r}")

class RangeList:
  """A sorted list of disjoint, non-touching half-open integer ranges.

     Ranges are stored as (begin, end) tuples. Adding a range merges it
     with all ranges it overlaps or touches, removing a range splits
     ranges which are only partially covered.

     Internally the list is viewed as a flattened sorted sequence of
     endpoints, e.g. [3, 6) [9, 13) is viewed as 3, 6, 9, 13. Even indices
     in this sequence correspond to range starts and odd ones to range ends.
  """

  def __init__(self, *ranges):
    # Ranges are not verified here; this is meant for tests only.
    self.ranges = [tuple(rg) for rg in ranges]

  def length(self):
    return len(self.ranges)

  def __len__(self):
    return len(self.ranges)

  def _value_at(self, index):
    """Returns value at index in flattened endpoint sequence."""
    if not 0 <= index < 2 * len(self.ranges):
      raise OutOfBoundsError(f"endpoint index {index} out of range "
                             f"[0, {2 * len(self.ranges)})")
    return self.ranges[index // 2][index % 2]

  def _locate(self, value):
    """Returns index of first endpoint which is greater than value
       (or 2 * length() if there is none)."""

    # Invariant
    #   i < l, value_at(i) <= value
    #   i > r, value < value_at(i)

    l, r = 0, 2 * len(self.ranges) - 1
    while l <= r:
      m = (l + r) // 2
      if self._value_at(m) <= value:
        l = m + 1
      else:
        r = m - 1
    return l

  def add(self, rg):
    """Adds range [begin, end), merging it with overlapping
       or adjacent ranges.

       For example adding [10, 16) to [4, 7) [9, 11) [15, 21)
       gives [4, 7) [9, 21).
    """

    _check_range(rg)
    begin, end = rg
    if begin == end:
      return

    begin_idx = self._locate(begin)
    end_idx = self._locate(end)

    new_begin, new_end = begin, end
    first, last = begin_idx, end_idx

    if begin_idx % 2 == 0:
      # Begin is outside of ranges, merge with preceding range if it ends right here
      prev_idx = begin_idx - 1
      if prev_idx > 0 and self._value_at(prev_idx) == begin:
        first = prev_idx
        new_begin = self._value_at(prev_idx - 1)
    else:
      new_begin = self._value_at(begin_idx - 1)

    if end_idx % 2 == 0:
      last = end_idx - 1
    else:
      new_end = self._value_at(end_idx)

    first //= 2
    last //= 2

    logger.debug("add [%d, %d): replacing ranges %d..%d with [%d, %d)",
                 begin, end, first, last, new_begin, new_end)
    self.ranges[first:last + 1] = [(new_begin, new_end)]

  def remove(self, rg):
    """Removes range [begin, end), splitting partially covered ranges.

       For example removing [6, 19) from [3, 8) [10, 14) [17, 32)
       gives [3, 6) [19, 32).
    """

    _check_range(rg)
    begin, end = rg
    if begin == end:
      return

    begin_idx = self._locate(begin)
    end_idx = self._locate(end)

    first, last = begin_idx, end_idx
    leftovers = []

    if begin_idx % 2 == 1:
      start = self._value_at(begin_idx - 1)
      if begin > start:
        leftovers.append((start, begin))

    if end_idx % 2 == 1:
      start = self._value_at(end_idx - 1)
      finish = self._value_at(end_idx)
      if end > start:
        leftovers.append((end, finish))
      else:
        # Range starts exactly at end so it stays intact
        last -= 2
    else:
      last -= 1

    first //= 2
    last //= 2

    logger.debug("remove [%d, %d): replacing ranges %d..%d with %s",
                 begin, end, first, last, leftovers)
    self.ranges[first:last + 1] = leftovers

  def print(self, p=None):
    """Prints ranges as a single line."""
    if p is None:
      p = PR.SourcePrinter()
    p.writeln(str(self))

  def dump(self, p):
    p.writeln(f"Range list ({len(self.ranges)} ranges)")
    with p:
      for i, (begin, end) in enumerate(self.ranges):
        p.writeln(f"#{i}: [{begin}, {end})")

  def __str__(self):
    return ' '.join(f'[{begin}, {end})' for begin, end in self.ranges)

  def __repr__(self):
    return f'RangeList({self})'
