"""Implementation of gene product association (GPR) parsing.

Gene product associations are boolean expressions over gene ids, e.g.
'(b0351 and b1241) or b1478'. Here they are parsed into a tree of
GprNode objects:

    expr   := term ('or' term)*
    term   := factor ('and' factor)*
    factor := GENE | '(' expr ')'

The tree is used to determine the isoenzymes (OR alternatives) of a
reaction and the genes of each enzyme complex (AND clauses).

f2ecm developers, August 2026
"""

import re

from ..exceptions import GprSyntaxError

TOKEN_PATTERN = re.compile(r'\(|\)|[^\s()]+')
OPERATORS = {'and', 'or'}


def tokenize(gpr):
    """Split a gene product association into tokens.

    Operators are converted to lower case, brackets are separate tokens.

    :param gpr: gene product association, e.g. '(G1 and G2) or G3'
    :type gpr: str
    :return: tokens
    :rtype: list of str
    """
    tokens = []
    for token in TOKEN_PATTERN.findall(gpr):
        tokens.append(token.lower() if token.lower() in OPERATORS else token)
    return tokens


class GprNode:

    def __init__(self, kind, children=None, gene=None):
        """Instantiate node of a GPR tree.

        :param kind: node kind
        :type kind: str ('gene', 'and', 'or')
        :param children: child nodes (for 'and', 'or')
        :type children: list of GprNode
        :param gene: gene id (for 'gene')
        :type gene: str
        """
        self.kind = kind
        self.children = children if children is not None else []
        self.gene = gene

    def __repr__(self):
        return f'GprNode({self.to_string()!r})'

    def genes(self):
        """Genes used in the association, in order of first appearance.

        :return: gene ids
        :rtype: list of str
        """
        if self.kind == 'gene':
            return [self.gene]
        genes = []
        for child in self.children:
            for gene in child.genes():
                if gene not in genes:
                    genes.append(gene)
        return genes

    def to_string(self):
        """Convert tree back to a gene product association string.

        AND clauses within an OR get enclosed in brackets.

        :return: gene product association
        :rtype: str
        """
        if self.kind == 'gene':
            return self.gene
        parts = []
        for child in self.children:
            part = child.to_string()
            if child.kind != 'gene':
                part = f'({part})'
            parts.append(part)
        return f' {self.kind} '.join(parts)

    def tokens(self):
        """Gene/operator sequence of the association, brackets removed."""
        if self.kind == 'gene':
            return [self.gene]
        tokens = []
        for idx, child in enumerate(self.children):
            if idx > 0:
                tokens.append(self.kind)
            tokens.extend(child.tokens())
        return tokens

    def is_dnf(self):
        """Check that the association is an OR of AND clauses.

        Nested associations like '(G1 or G2) and G3' (enzyme complexes
        composed of isoenzymes) are not in this form.

        :return: flag if association is an OR of gene only AND clauses
        :rtype: bool
        """
        if self.kind == 'gene':
            return True
        if self.kind == 'and':
            return all(child.kind == 'gene' for child in self.children)
        return all(child.is_dnf() and child.kind != 'or' for child in self.children)

    def isozymes(self):
        """Determine gene composition of each isoenzyme.

        For an OR of AND clauses, each clause is one isoenzyme.
        Other associations get flattened by reading the gene/operator
        sequence without brackets and splitting at each 'or',
        e.g. '(G1 or G2) and (G3 or G4)' gives [G1], [G2, G3], [G4].

        :return: genes for each isoenzyme
        :rtype: list of list of str
        """
        if self.is_dnf():
            if self.kind == 'or':
                return [child.genes() for child in self.children]
            return [self.genes()]

        isozymes = [[]]
        for token in self.tokens():
            if token == 'or':
                isozymes.append([])
            elif token != 'and' and token not in isozymes[-1]:
                isozymes[-1].append(token)
        return isozymes


class GprParser:

    def __init__(self, gpr):
        self.gpr = gpr
        self.tokens = tokenize(gpr)
        self.pos = 0

    def _peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self):
        token = self._peek()
        self.pos += 1
        return token

    def _error(self, msg):
        return GprSyntaxError(f'{msg} in gene product association "{self.gpr}"')

    def parse(self):
        node = self._parse_expr()
        if self._peek() is not None:
            raise self._error(f'unexpected token "{self._peek()}"')
        return node

    def _parse_expr(self):
        return self._parse_nary('or', self._parse_term)

    def _parse_term(self):
        return self._parse_nary('and', self._parse_factor)

    def _parse_nary(self, operator, parse_operand):
        operands = [parse_operand()]
        while self._peek() == operator:
            self._next()
            operands.append(parse_operand())
        if len(operands) == 1:
            return operands[0]
        # flatten nested operations of same kind, e.g. 'G1 or (G2 or G3)'
        children = []
        for operand in operands:
            if operand.kind == operator:
                children.extend(operand.children)
            else:
                children.append(operand)
        return GprNode(operator, children)

    def _parse_factor(self):
        token = self._next()
        if token is None:
            raise self._error('unexpected end')
        if token == '(':
            if self._peek() == ')':
                raise self._error('empty brackets')
            node = self._parse_expr()
            if self._next() != ')':
                raise self._error('unbalanced brackets')
            return node
        if token == ')' or token in OPERATORS:
            raise self._error(f'unexpected token "{token}"')
        return GprNode('gene', gene=token)


def parse_gpr(gpr):
    """Parse a gene product association into a GprNode tree.

    :param gpr: gene product association, e.g. 'G1 or (G2 and G3)'
    :type gpr: str or None
    :return: root node of tree, None for empty associations
    :rtype: GprNode or None
    """
    if type(gpr) is not str or len(gpr.strip()) == 0:
        return None
    return GprParser(gpr).parse()


def get_isozymes(gpr):
    """Gene composition of the isoenzymes for a gene product association.

    :param gpr: gene product association
    :type gpr: str or None
    :return: genes per isoenzyme (empty list if no genes associated)
    :rtype: list of list of str
    """
    tree = parse_gpr(gpr)
    return tree.isozymes() if tree is not None else []


def isozyme_gpr(genes):
    """Create gene product association for a single enzyme (complex).

    :param genes: genes of the enzyme complex
    :type genes: list of str
    :return: gene product association, e.g. '(G1 and G2)'
    :rtype: str
    """
    gpr = ' and '.join(genes)
    if len(genes) > 1:
        gpr = '(' + gpr + ')'
    return gpr
