#!/usr/bin/env python

# quick checks, the full suite is: python -m pytest

import boolcompare.boolalg.tools as batools

import sys

if __name__ == '__main__':
    what = 'all'
    if sys.argv[1:]:
        what = sys.argv[1]

    if what in ['all', 'compile']:
        c = batools.compile_expr("(A+B')'")
        assert str(c.ast) == "(A+B')'"
        assert batools.compile_expr('A B').rpn == batools.compile_expr('A*B').rpn

    if what in ['all', 'compare']:
        report = batools.compare_texts("(A+B')'", "A'*B")
        assert report.equivalent
        for line in batools.format_table(report.rows, report.varnames):
            print(line)

        report = batools.compare_texts('1', '0')
        assert len(report.rows) == 1 and not report.equivalent

        report = batools.compare_texts('A & B', 'A')
        print(report.error)
        assert report.error == "Unexpected character '&' at position 3"

    if what in ['all', 'random-bool-exprs']:
        varnames = list('ABCDEF')
        for n_nodes in range(1, 20):
            expr = batools.generate(n_nodes, varnames)
            c = batools.compile_expr(str(expr))
            vnames = batools.sort_varnames(expr.varnames())
            expected = [i for (i, v) in enumerate(batools.all_assignments(vnames)) if expr.evaluate(v)]
            assert batools.to_truth_indices(c, vnames) == expected
            print(f'{n_nodes}: {expr}')

    print('pass')
