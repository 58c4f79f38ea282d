import pytest

from tinylisp.evaluation import SpecialForm, extend_forms
from tinylisp.types import Environment, Symbol

# Extra special forms used only by the tests. The core registry knows nothing
# but `if`, so these give the evaluator observable effects to check against:
#   (bind! name expr)  evaluates expr, returns its value and binds name to it
#   (touch! tag)       records tag in the `touched` list and returns it


def bind_form(form, operands, env, forms, evaluate_fn):
    name, value_expr = operands
    value, env = evaluate_fn(value_expr, env, forms)
    return value, env.bind(name, value)


@pytest.fixture
def env():
    return Environment.empty()


@pytest.fixture
def touched():
    return []


@pytest.fixture
def forms(touched):
    def touch_form(form, operands, env, forms, evaluate_fn):
        (tag,) = operands
        touched.append(tag)
        return tag, env

    return extend_forms(
        SpecialForm(Symbol("bind!"), 2, bind_form),
        SpecialForm(Symbol("touch!"), 1, touch_form),
    )
