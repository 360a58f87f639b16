"""Sparse polynomials of one variable.

A Polynomial stores only its nonzero terms, ordered by strictly descending
exponent.  Every way of building one (the constructor, copying, arithmetic)
goes through `Polynomial.add_term`, which is the only code that touches the
term storage.

Important classes:
 - Term: an immutable (coef, exp) pair
 - Polynomial: the mutable sparse polynomial
"""

from collections import namedtuple
import math

from sparsepoly.common import typechecked

class Term(namedtuple("Term", ("coef", "exp"))):
    """A single monomial coef*x^exp."""
    __slots__ = ()

class Polynomial(object):
    __slots__ = ("_terms",)

    def __init__(self, terms=()):
        self._terms = []
        for coef, exp in terms:
            self.add_term(coef, exp)

    @classmethod
    def parse(cls, s : str):
        """Read a polynomial in term-list format ("n c1 e1 ... cn en")."""
        from sparsepoly.parse import parse_term_list
        return parse_term_list(s)

    @property
    def terms(self):
        return tuple(self._terms)

    @typechecked
    def add_term(self, coef : int, exp : int) -> None:
        """Add coef*x^exp to this polynomial in place.

        Terms with equal exponents are merged, and a term whose coefficient
        becomes zero is removed.
        """
        if exp < 0:
            raise ValueError("negative exponent: {}".format(exp))
        if coef == 0:
            return
        terms = self._terms
        i = 0
        while i < len(terms) and terms[i].exp > exp:
            i += 1
        if i < len(terms) and terms[i].exp == exp:
            coef += terms[i].coef
            if coef == 0:
                del terms[i]
            else:
                terms[i] = Term(coef, exp)
        else:
            terms.insert(i, Term(coef, exp))

    def clear(self):
        del self._terms[:]

    def copy(self):
        return Polynomial(self._terms)

    def assign(self, other):
        """Make this polynomial equal to `other`, keeping its own identity."""
        if other is self:
            return self
        self.clear()
        for coef, exp in other._terms:
            self.add_term(coef, exp)
        return self

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    # Inspection

    def __len__(self):
        return len(self._terms)

    def __iter__(self):
        return iter(self.terms)

    def __bool__(self):
        return bool(self._terms)

    def is_zero(self):
        return not self._terms

    def degree(self):
        """The largest exponent, or -1 for the zero polynomial."""
        if not self._terms:
            return -1
        return self._terms[0].exp

    def coefficient(self, exp):
        for t in self._terms:
            if t.exp == exp:
                return t.coef
            if t.exp < exp:
                break
        return 0

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    # mutable, so not hashable
    __hash__ = None

    # Evaluation

    @typechecked
    def evaluate(self, x : float) -> float:
        """Compute the value at x.

        A power too large for a float becomes an infinity of the right sign,
        as C pow() would give.
        """
        x = float(x)
        result = 0.0
        for coef, exp in self._terms:
            try:
                power = x ** exp
            except OverflowError:
                power = -math.inf if (x < 0 and exp % 2) else math.inf
            result += coef * power
        return result

    def __call__(self, x):
        return self.evaluate(x)

    # Arithmetic

    def add(self, other):
        """Merge two descending term sequences into a new polynomial."""
        result = Polynomial()
        lhs = self._terms
        rhs = other._terms
        i = j = 0
        while i < len(lhs) or j < len(rhs):
            if j == len(rhs) or (i < len(lhs) and lhs[i].exp > rhs[j].exp):
                result.add_term(lhs[i].coef, lhs[i].exp)
                i += 1
            elif i == len(lhs) or rhs[j].exp > lhs[i].exp:
                result.add_term(rhs[j].coef, rhs[j].exp)
                j += 1
            else:
                result.add_term(lhs[i].coef + rhs[j].coef, lhs[i].exp)
                i += 1
                j += 1
        return result

    def negate(self):
        result = Polynomial()
        for coef, exp in self._terms:
            result.add_term(-coef, exp)
        return result

    def subtract(self, other):
        return self.add(other.negate())

    def multiply(self, other):
        result = Polynomial()
        for c1, e1 in self._terms:
            for c2, e2 in other._terms:
                result.add_term(c1 * c2, e1 + e2)
        return result

    def scale(self, k : int):
        result = Polynomial()
        for coef, exp in self._terms:
            result.add_term(coef * k, exp)
        return result

    def __add__(self, other):
        if isinstance(other, Polynomial):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Polynomial):
            return self.subtract(other)
        return NotImplemented

    def __neg__(self):
        return self.negate()

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return self.multiply(other)
        elif isinstance(other, int):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, int):
            return self.scale(other)
        return NotImplemented

    # Text

    def to_string(self):
        """Render as a sum of terms, e.g. "3x^2 - 1x^1 + 4".

        A negative term is always introduced by " - ", even when it comes
        first.  The zero polynomial renders as the empty string.
        """
        s = ""
        for i, (coef, exp) in enumerate(self._terms):
            if coef < 0:
                s += " - "
            elif i > 0:
                s += " + "
            s += str(abs(coef))
            if exp != 0:
                s += "x^{}".format(exp)
        return s

    def __str__(self):
        return self.to_string()

    def to_term_list(self):
        """Render in the term-list format read by `Polynomial.parse`."""
        words = [str(len(self._terms))]
        for coef, exp in self._terms:
            words.append(str(coef))
            words.append(str(exp))
        return " ".join(words)

    def __repr__(self):
        return "Polynomial({!r})".format([tuple(t) for t in self._terms])
