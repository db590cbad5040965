# The MIT License (MIT)
#
# Copyright (c) 2018-2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Parser for textual range list operations."""

import re

from rangelist.common.error import error, error_if

ACTIONS = ('add', 'remove')

_op_re = re.compile(r'^\s*([a-z]+)\s*:\s*(.*?)\s*$')
# Accepts "B,E", "[B, E)" and "[B, E]"
_range_re = re.compile(r'^\[?\s*(-?[0-9]+)\s*,\s*(-?[0-9]+)\s*[)\]]?$')

def read_range(s):
  """Parse range e.g. "1,5" or "[1, 5)"."""
  m = _range_re.match(s)
  error_if(m is None, f"failed to parse range: '{s}'")
  return int(m.group(1)), int(m.group(2))

def read_op(s):
  """Parse operation e.g. "add:1,5" or "remove:[10, 20)"."""
  m = _op_re.match(s)
  if m is None:
    error(f"failed to parse operation: '{s}' (expected ACTION:BEGIN,END)")
  action = m.group(1)
  error_if(action not in ACTIONS,
           f"unknown action '{action}' in '{s}' (expected one of {', '.join(ACTIONS)})")
  return action, read_range(m.group(2))

def read_ops(args):
  return [read_op(a) for a in args]
