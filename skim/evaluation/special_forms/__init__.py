"""Registry of special forms for the Skim evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application; a
handler receives the unevaluated argument expressions as a Python list.
"""

from skim.types.symbol import Symbol
from skim.evaluation.special_forms.quote_form import quote_form
from skim.evaluation.special_forms.if_form import if_form
from skim.evaluation.special_forms.let_forms import let_form, let_star_form, letrec_form
from skim.evaluation.special_forms.define_form import define_form
from skim.evaluation.special_forms.set_form import set_form
from skim.evaluation.special_forms.lambda_form import lambda_form
from skim.evaluation.special_forms.begin_form import begin_form
from skim.evaluation.special_forms.cond_form import cond_form
from skim.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("let"): let_form,
    Symbol("let*"): let_star_form,
    Symbol("letrec"): letrec_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
    Symbol("cond"): cond_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
}
