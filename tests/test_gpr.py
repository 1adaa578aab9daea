import pytest

from f2ecm import GprSyntaxError
from f2ecm.network.gpr import parse_gpr, get_isozymes, isozyme_gpr, tokenize


def test_tokenize_lowercases_operators():
    assert tokenize('(G1 AND G2) Or G3') == ['(', 'G1', 'and', 'G2', ')', 'or', 'G3']


def test_empty_gpr():
    assert parse_gpr('') is None
    assert parse_gpr('   ') is None
    assert parse_gpr(None) is None
    assert get_isozymes('') == []


def test_single_gene():
    tree = parse_gpr('b0001')
    assert tree.kind == 'gene'
    assert tree.genes() == ['b0001']
    assert tree.isozymes() == [['b0001']]


def test_or_of_and_clauses():
    tree = parse_gpr('(G1 and G2) or G3 or (G4 and G5 and G6)')
    assert tree.kind == 'or'
    assert tree.is_dnf()
    assert tree.isozymes() == [['G1', 'G2'], ['G3'], ['G4', 'G5', 'G6']]
    assert tree.genes() == ['G1', 'G2', 'G3', 'G4', 'G5', 'G6']


def test_nested_same_operators_get_flattened():
    tree = parse_gpr('G1 or (G2 or (G3 or G4))')
    assert tree.kind == 'or'
    assert len(tree.children) == 4
    assert parse_gpr('((G1 and G2))').isozymes() == [['G1', 'G2']]


def test_and_binds_stronger_than_or():
    assert get_isozymes('G1 and G2 or G3') == [['G1', 'G2'], ['G3']]


def test_to_string():
    assert parse_gpr('G3 or (G1 and G2)').to_string() == 'G3 or (G1 and G2)'
    assert parse_gpr('(G1 and G2)').to_string() == 'G1 and G2'


def test_complex_of_isoenzymes_is_flattened():
    tree = parse_gpr('(G1 or G2) and (G3 or G4)')
    assert tree.is_dnf() is False
    # read left to right ignoring brackets, split at each 'or'
    assert tree.isozymes() == [['G1'], ['G2', 'G3'], ['G4']]


def test_isozyme_count_matches_or_count_for_nested_rules():
    gpr = 'G1 and (G2 or G3)'
    assert len(get_isozymes(gpr)) == gpr.count(' or ') + 1


@pytest.mark.parametrize('gpr', ['(G1 and G2', 'G1 and', 'or G1', 'G1 ) or G2', '()', 'G1 G2'])
def test_invalid_gpr_raises(gpr):
    with pytest.raises(GprSyntaxError):
        parse_gpr(gpr)


def test_isozyme_gpr():
    assert isozyme_gpr(['G1']) == 'G1'
    assert isozyme_gpr(['G1', 'G2']) == '(G1 and G2)'
