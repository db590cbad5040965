#!/usr/bin/env python3

# The MIT License (MIT)
#
# Copyright (c) 2018-2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Main driver for rangelist project.

Run with --help for details.
"""

import argparse
import logging

from rangelist.common.error import error, set_basename, set_options, InvalidArgumentError
import rangelist.common.printers as PR
import rangelist.parse as PA
import rangelist.range_list as RL

def main():
  set_basename('rangelist')

  class Formatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawDescriptionHelpFormatter):
    pass
  parser = argparse.ArgumentParser(
    formatter_class=Formatter,
    description="Apply add/remove operations to a list of half-open integer ranges "
                "and print the result.",
    epilog="""\

OP should be one of
  add:BEGIN,END     Add range [BEGIN, END), merging overlapping ranges.
  remove:BEGIN,END  Remove range [BEGIN, END), splitting ranges if needed.

Ranges may also be written as "[BEGIN, END)".

Examples:
  $ {exe} add:1,5 add:10,20 remove:3,12
  [1, 3) [12, 20)

  Show intermediate results:
  $ {exe} --trace add:20,100 'remove:[60, 80)'\
""".format(exe='python -mrangelist'))
  parser.add_argument(
    'ops',
    metavar='OP',
    help="Operation to apply.",
    nargs='*')
  parser.add_argument(
    '--trace', '-t',
    help="Print ranges after each operation.",
    action='store_true')
  parser.add_argument(
    '--dump',
    help="Print detailed dump of final ranges.",
    action='store_true')
  parser.add_argument(
    '--verbose', '-v',
    help="Print diagnostic info.",
    action='count',
    default=0)
  parser.add_argument(
    '--print-stack',
    help="Print call stack on error (INTERNAL).",
    action='store_true')

  args = parser.parse_args()

  v = min(2, args.verbose)
  loglevel = logging.WARNING - 10 * v
  logging.basicConfig(level=loglevel)

  set_options(print_stack=args.print_stack)

  ops = PA.read_ops(args.ops)

  rl = RL.RangeList()
  p = PR.SourcePrinter()

  for action, rg in ops:
    try:
      if action == 'add':
        rl.add(rg)
      else:
        rl.remove(rg)
    except InvalidArgumentError as e:
      error(f"{action}: {e}")
    if args.trace:
      p.writeln(f"{action} [{rg[0]}, {rg[1]}): {rl}")

  if args.dump:
    rl.dump(p)
  else:
    rl.print(p)

if __name__ == '__main__':
  main()
