#!/usr/bin/env python

# compare the truth tables of two boolean expressions
#
# eg: boolcompare "(A+B')'" "A'*B"

import argparse
import dataclasses
import logging
import sys

from boolcompare.boolalg.config import ConfigError, MARKUPS, load_settings
from boolcompare.boolalg.tools import compile_expr, compare_texts, format_table, to_truth_indices
from boolcompare.graphs import nxtools

EXIT_EQUIVALENT = 0
EXIT_PARSE_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_DIFFERENT = 3

SYNTAX_HELP = """syntax:
  OR      A+B  A|B
  AND     A*B  A.B  A·B  or adjacency: A B  (A)(B)  A(B)  A!B
  names   a letter then letters, digits, _ : AB is one variable, not A*B
  XOR     A^B
  NOT     postfix A'  (A+B)'  (unicode ‘ ’ also accepted), prefix !A  ~A
  consts  1 0
"""

def main(argv=None):
    ap = argparse.ArgumentParser(prog='boolcompare',
        description='Compare the truth tables of two boolean expressions',
        epilog=SYNTAX_HELP, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument('expr1', help="first expression, eg: \"(A+B')'\"")
    ap.add_argument('expr2', help="second expression, eg: \"A'*B\"")
    ap.add_argument('-d', '--diff', action='store_true', default=None, help='show only differing rows')
    ap.add_argument('-n', '--max-vars', type=int, help='refuse to build tables over more variables than this')
    ap.add_argument('-c', '--config', help='path to a JSON settings file')
    ap.add_argument('-m', '--markup', choices=MARKUPS, help='how to print the parsed expressions')
    ap.add_argument('--minterms', action='store_true', help='print the rows where each expression is true')
    ap.add_argument('--dot', metavar='PATH', help='draw the tree of the first expression to PATH (.svg or .png, needs graphviz)')
    ap.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    try:
        settings = load_settings(args.config)
        overrides = {}
        if args.diff != None:
            overrides['only_diff'] = args.diff
        if args.max_vars != None:
            overrides['max_vars'] = args.max_vars
        if args.markup != None:
            overrides['markup'] = args.markup
        settings = dataclasses.replace(settings, **overrides).validated()
    except ConfigError as e:
        print(f'config error: {e}', file=sys.stderr)
        return EXIT_CONFIG_ERROR

    report = compare_texts(args.expr1, args.expr2, settings)
    if report.error != None:
        print(f'Parse error: {report.error}', file=sys.stderr)
        return EXIT_PARSE_ERROR

    print(f'expr1: {report.markup1}')
    print(f'expr2: {report.markup2}')
    print('Variables: ' + (', '.join(report.varnames) if report.varnames else '-'))

    rows = report.display_rows
    if rows:
        for line in format_table(rows, report.varnames):
            print(line)
    else:
        print('No rows to display.')

    n_diff = sum(not r.same for r in report.rows)
    print('equivalent' if report.equivalent else f'{n_diff} of {len(report.rows)} rows differ')

    if args.minterms:
        for (name, text) in [('expr1', args.expr1), ('expr2', args.expr2)]:
            print(f'{name} minterms: {to_truth_indices(compile_expr(text), report.varnames)}')

    if args.dot:
        G = nxtools.ast_to_graph(compile_expr(args.expr1).ast)
        try:
            nxtools.draw(G, args.dot)
        except (OSError, RuntimeError, ValueError) as e:
            print(f'cannot draw {args.dot}: {e}', file=sys.stderr)

    return EXIT_EQUIVALENT if report.equivalent else EXIT_DIFFERENT

if __name__ == '__main__':
    sys.exit(main())
