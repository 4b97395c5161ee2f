'''
Numeric domain tests
'''

import math

import regex

from rpnexpr.util import InvalidInput
from rpnexpr.domain import (Domain, IntegerDomain, RealDomain, DOMAINS,
                            DEFAULT_DOMAIN, getdomain)
from rpnexpr.expression import Square, Sqrt

from pytest import raises, mark


@mark.parametrize('token,value', [
    ('0', 0),
    ('42', 42),
    ('-1', -1),
    ('+7', 7),
    ('007', 7),
    ('9223372036854775807', 2**63 - 1),
    ('-9223372036854775808', -2**63),
])
def test_integer_literals(integers, token, value):
    assert integers.convert(token) == value


@mark.parametrize('token', [
    'something', '1.5', '1_000', '1e3', '--1', '-', '', ' 1',
    '\N{ARABIC-INDIC DIGIT ONE}',
])
def test_integer_bad_literals(integers, token):
    with raises(InvalidInput) as e:
        integers.convert(token)
    assert e.value.token == token


def test_integer_out_of_range(integers):
    with raises(InvalidInput, match=regex.escape('9223372036854775808')):
        integers.convert('9223372036854775808')
    with raises(InvalidInput):
        integers.convert('-9223372036854775809')


def test_integer_conversion_chains_cause(integers):
    with raises(InvalidInput) as e:
        integers.convert('x')
    assert isinstance(e.value.__cause__, ValueError)


def test_integer_wraparound(integers):
    assert integers.add(2**63 - 1, 1) == -2**63
    assert integers.subtract(-2**63, 1) == 2**63 - 1
    assert integers.multiply(2**62, 4) == 0
    assert integers.divide(-2**63, -1) == -2**63


@mark.parametrize('left,right,quotient', [
    (7, 2, 3),
    (-7, 2, -3),
    (7, -2, -3),
    (-7, -2, 3),
    (1, 3, 0),
])
def test_integer_division_truncates(integers, left, right, quotient):
    assert integers.divide(left, right) == quotient


def test_narrow_integers():
    d = IntegerDomain(bits=8)
    assert d.convert('127') == 127
    with raises(InvalidInput):
        d.convert('128')
    assert d.add(127, 1) == -128
    assert d.multiply(16, 16) == 0


def test_bad_width():
    with raises(ValueError):
        IntegerDomain(bits=0)


@mark.parametrize('token,value', [
    ('1', 1.0),
    ('-1.5', -1.5),
    ('1.', 1.0),
    ('.5', 0.5),
    ('1e3', 1000.0),
    ('2.5E-1', 0.25),
    ('+inf', math.inf),
    ('-Infinity', -math.inf),
])
def test_real_literals(reals, token, value):
    assert reals.convert(token) == value


def test_real_nan(reals):
    assert math.isnan(reals.convert('NaN'))


@mark.parametrize('token', ['something', '.', '1e', '1_0', 'e5', '0x10'])
def test_real_bad_literals(reals, token):
    with raises(InvalidInput):
        reals.convert(token)


def test_zero(integers, reals):
    assert integers.iszero(0)
    assert not integers.iszero(1)
    assert reals.iszero(0.0)
    assert reals.iszero(-0.0)
    assert not reals.iszero(math.nan)


def test_operators(integers, reals):
    assert integers.OPERATORS['sqr'] is Square
    assert 'sqrt' not in integers.OPERATORS
    assert reals.OPERATORS['sqrt'] is Sqrt
    assert set(reals.OPERATORS) == {'+', '-', '*', '/', 'sqr', 'sqrt'}


def test_getdomain():
    assert getdomain() is DOMAINS[DEFAULT_DOMAIN]
    assert isinstance(getdomain(), IntegerDomain)
    assert isinstance(getdomain('f'), RealDomain)
    d = IntegerDomain(bits=16)
    assert getdomain(d) is d
    with raises(ValueError, match='No such domain'):
        getdomain('x')


def test_convert_by_keyword(integers):
    assert integers.convert(token='12') == 12
    with raises(InvalidInput) as e:
        integers.convert(token='x')
    assert e.value.token == 'x'


def test_abstract_domain():
    with raises(TypeError, match='Domain has no number grammar'):
        Domain()


def test_supports(integers, reals):
    assert integers.supports(Square)
    assert not integers.supports(Sqrt)
    assert reals.supports(Sqrt)


def test_sqrt_only_real(integers, reals):
    message = 'sqrt not in IntegerDomain(bits=64)'
    with raises(TypeError, match=regex.escape(message)):
        integers.sqrt(16)
    assert reals.sqrt(16.0) == 4.0
