# TEST WITH: python -m pytest tests/test_nxtools.py

from subprocess import Popen, PIPE

import networkx as nx

from boolcompare.boolalg.expr import *

#------------------------------------------------------------------------------
# expression tree -> graph
#------------------------------------------------------------------------------

# nodes are numbered in preorder, root is 0
# node attributes: label ('AND', 'NOT', 'A', '1', ...), leaf (bool)
# edges point parent -> child with attribute side ('left', 'right' or 'operand')
def ast_to_graph(expr):
    G = nx.DiGraph()

    def add(node):
        n = G.number_of_nodes()
        match node:
            case Var():
                G.add_node(n, label=node.name, leaf=True)
            case Val():
                G.add_node(n, label=str(node), leaf=True)
            case Not():
                G.add_node(n, label='NOT', leaf=False)
                G.add_edge(n, add(node.child), side='operand')
            case BinaryOp():
                G.add_node(n, label=node.kind.value, leaf=False)
                G.add_edge(n, add(node.left), side='left')
                G.add_edge(n, add(node.right), side='right')
        return n

    add(expr)
    return G

#------------------------------------------------------------------------------
# graphviz integration
#------------------------------------------------------------------------------

def expr_node_attrs(G, n):
    attrs = [f'label="{G.nodes[n]["label"]}"']
    if G.nodes[n]['leaf']:
        attrs.append('shape="plain"')
    return attrs

# f_node_attrs: function to return additional node attributes
# f_edge_attrs: function to return additional edge attributes
def gen_dot(G, f_node_attrs=expr_node_attrs, f_edge_attrs=None, f_extra=None):
    dot = []
    dot.append('digraph G {')

    # global graph settings
    dot.append('// global settings')
    dot.append('node [shape="rectangle"];')
    dot.append('edge [];')

    # node list
    dot.append('// nodes')
    for n in G.nodes:
        attrs = []
        if f_node_attrs:
            attrs.extend(f_node_attrs(G, n))
        dot.append(f'{n} [' + ' '.join(attrs) + '];')

    # edge list
    dot.append('// edges')
    for (n0,n1) in G.edges:
        attrs = []
        if f_edge_attrs:
            attrs.extend(f_edge_attrs(G, n0, n1))
        dot.append(f'{n0} -> {n1} [' + ' '.join(attrs) + '];')

    if f_extra != None:
        dot.append(f_extra(G))

    dot.append('}')

    return '\n'.join(dot)

# G:            the graph
# fpath:        path to output file, .svg or .png
def draw(G, fpath, f_node_attrs=expr_node_attrs, f_edge_attrs=None, f_extra=None, verbose=False):
    dot = gen_dot(G, f_node_attrs, f_edge_attrs, f_extra)

    if fpath.endswith('.svg'):
        ftype = 'svg'
    elif fpath.endswith('.png'):
        ftype = 'png'
    else:
        raise ValueError(f'cannot infer image type from {fpath}, use .svg or .png')

    cmd = ['dot', f'-T{ftype}', '-o', fpath]

    if verbose:
        print('cmd: ' + ' '.join(cmd))

    process = Popen(cmd, stdin=PIPE, stdout=PIPE, stderr=PIPE)
    (stdout, stderr) = process.communicate(dot.encode('utf-8'))
    stderr = stderr.decode('utf-8')
    if process.returncode != 0:
        raise RuntimeError(f'dot failed: {stderr}')
