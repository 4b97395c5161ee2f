from pytest import fixture

from rpnexpr.domain import IntegerDomain, RealDomain
from rpnexpr.parser import Parser
from rpnexpr.evaluator import Evaluator


@fixture
def integers():
    return IntegerDomain()


@fixture
def reals():
    return RealDomain()


@fixture
def parser(integers):
    return Parser(integers)


@fixture
def evaluator(integers):
    return Evaluator(integers)
