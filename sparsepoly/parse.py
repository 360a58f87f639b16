"""Parsers for the two textual polynomial formats.

The important functions are:
 - parse_term_list: str -> Polynomial, for "n c1 e1 c2 e2 ... cn en"
 - read_term_list:  (str, offset) -> (Polynomial, offset), one term list of many
 - parse_poly:      str -> Polynomial, for sums of terms like "3x^2 - 1x^1 + 4"

`parse_poly` reads back exactly what `Polynomial.to_string` writes, and also
accepts a few shorthands ("x", "2x", "3*x^2").
"""

# 3rd party
from ply import lex, yacc

# ours
from sparsepoly.polynomials import Polynomial

class ParseError(ValueError):
    def __init__(self, message, pos=None):
        if pos is not None:
            message = "{} at offset {}".format(message, pos)
        super().__init__(message)
        self.pos = pos

# Lexer ########################################################################

tokens = ("NUM", "X", "CARET", "TIMES", "PLUS", "MINUS")

def make_lexer():
    t_X     = r"[xX]"
    t_CARET = r"\^"
    t_TIMES = r"\*"
    t_PLUS  = r"\+"
    t_MINUS = r"-"

    def t_NUM(t):
        r"\d+"
        t.value = int(t.value)
        return t

    t_ignore = " \t\r\n"

    def t_error(t):
        raise ParseError("illegal character {}".format(repr(t.value[0])), t.lexpos)

    return lex.lex()

_lexer = make_lexer()
def _lexer_at(s, pos=0):
    lexer = _lexer.clone() # lexer objects are stateful
    lexer.input(s)
    lexer.lexpos = pos
    return lexer

def tokenize(s, pos=0):
    lexer = _lexer_at(s, pos)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Term lists ###################################################################

def _integers(s, pos=0):
    """Yields (value, start, end) for each signed integer in s from offset pos.

    Tokens are read lazily, so text after the last integer consumed is never
    looked at.  A sign must be immediately followed by its digits.
    """
    lexer = _lexer_at(s, pos)
    while True:
        tok = lexer.token()
        if not tok:
            return
        start = tok.lexpos
        sign = 1
        if tok.type in ("PLUS", "MINUS"):
            if tok.type == "MINUS":
                sign = -1
            tok = lexer.token()
            if tok is None or tok.type != "NUM" or tok.lexpos != start + 1:
                raise ParseError("expected digits right after sign", start)
        elif tok.type != "NUM":
            raise ParseError("expected an integer, got {}".format(repr(tok.value)), start)
        yield (sign * tok.value, start, lexer.lexpos)

def read_term_list(s, pos=0):
    """Read one term list starting at offset pos of s.

    Returns the polynomial and the offset just past its last integer, so
    several term lists can be read one after another from the same text.
    """
    ints = _integers(s, pos)
    count = next(ints, None)
    if count is None:
        raise ParseError("missing term count", len(s))
    n, start, end = count
    if n < 0:
        raise ParseError("negative term count {}".format(n), start)
    res = Polynomial()
    for i in range(n):
        coef = next(ints, None)
        exp = next(ints, None)
        if exp is None:
            raise ParseError("expected {} terms but found {}".format(n, i), len(s))
        if exp[0] < 0:
            raise ParseError("negative exponent {}".format(exp[0]), exp[1])
        res.add_term(coef[0], exp[0])
        end = exp[2]
    return res, end

def parse_term_list(s):
    """Parse a term count followed by that many (coefficient, exponent) pairs.

    Pairs may come in any order; they are added one at a time, so the result
    is normalized regardless.  Anything after the last pair is an error.
    """
    res, end = read_term_list(s)
    for tok in tokenize(s, end):
        raise ParseError("unexpected input after the term list", tok.lexpos)
    return res

# Sums of terms ################################################################

def make_parser():
    start = "poly"

    def p_poly(p):
        """poly :
                | terms"""
        p[0] = Polynomial(p[1] if len(p) > 1 else ())

    def p_terms_first(p):
        """terms : term
                 | PLUS term
                 | MINUS term"""
        if len(p) == 2:
            p[0] = [p[1]]
        elif p[1] == "-":
            coef, exp = p[2]
            p[0] = [(-coef, exp)]
        else:
            p[0] = [p[2]]

    def p_terms_rest(p):
        """terms : terms PLUS term
                 | terms MINUS term"""
        coef, exp = p[3]
        if p[2] == "-":
            coef = -coef
        p[0] = p[1] + [(coef, exp)]

    def p_term_constant(p):
        """term : NUM"""
        p[0] = (p[1], 0)

    def p_term_monomial(p):
        """term : monomial"""
        p[0] = (1, p[1])

    def p_term_scaled(p):
        """term : NUM monomial
                | NUM TIMES monomial"""
        p[0] = (p[1], p[len(p) - 1])

    # a monomial's value is its exponent
    def p_monomial(p):
        """monomial : X
                    | X CARET NUM"""
        p[0] = p[3] if len(p) > 2 else 1

    def p_error(p):
        if p is None:
            raise ParseError("unexpected end of input")
        raise ParseError("unexpected {}".format(repr(p.value)), p.lexpos)

    return yacc.yacc(debug=False, write_tables=False)

_parser = make_parser()

def parse_poly(s):
    """Parse a polynomial written as a sum of terms."""
    return _parser.parse(s, lexer=_lexer.clone())
