"""Registry of special forms for the lispy evaluator.

Special forms are Natives that evaluate their own arguments selectively (or
not at all). They are bound by name in the root environment at startup.
"""

from lispy.evaluation.special_forms.quote_forms import quote_form
from lispy.evaluation.special_forms.define_form import define_form
from lispy.evaluation.special_forms.set_form import set_form
from lispy.evaluation.special_forms.lambda_form import lambda_form
from lispy.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "setvalue": set_form,
    "define": define_form,
    "lambda": lambda_form,
    "if": if_form,
}
