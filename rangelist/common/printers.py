# The MIT License (MIT)
#
# Copyright (c) 2018-2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Text sinks for displaying range lists."""

import sys

class SourcePrinter:
  """Line-oriented printer with nesting.

     Each `with p:` block indents subsequent lines by one more `tab`.
  """

  def __init__(self, out=None, tab='  '):
    # Resolve stdout lazily so that redirections (e.g. in tests) are honored
    self.out = out if out is not None else sys.stdout
    self.tab = tab
    self.depth = 0

  def __enter__(self):
    self.depth += 1
    return self

  def __exit__(self, type, value, traceback):
    assert self.depth > 0
    self.depth -= 1
    return False

  @property
  def indent(self):
    return self.tab * self.depth

  def write(self, s):
    """Write text, indenting every line of it."""
    lines = str(s).split('\n')
    if len(lines) > 1 and not lines[-1]:
      lines.pop()
    for line in lines:
      self.out.write((self.indent + line if line else line) + '\n')

  def writeln(self, s=''):
    self.write(str(s) + '\n')
