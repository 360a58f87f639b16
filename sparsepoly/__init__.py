"""Sparse polynomials of one variable with integer coefficients."""

from sparsepoly.polynomials import Term, Polynomial
