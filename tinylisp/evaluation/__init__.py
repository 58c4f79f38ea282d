from tinylisp.evaluation.evaluator import evaluate, evaluate0
from tinylisp.evaluation.special_forms import SPECIAL_FORMS, SpecialForm, extend_forms

__all__ = ["evaluate", "evaluate0", "SPECIAL_FORMS", "SpecialForm", "extend_forms"]
