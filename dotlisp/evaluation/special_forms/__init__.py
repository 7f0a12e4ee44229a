"""Registry of special forms for the dotlisp evaluator.

Maps upper-cased operator names to handler functions that implement
non-standard evaluation rules. The evaluator consults this table before
primitive and user-function application.
"""

from dotlisp.evaluation.special_forms.quote_form import quote_form
from dotlisp.evaluation.special_forms.cond_form import cond_form
from dotlisp.evaluation.special_forms.defun_form import defun_form

SPECIAL_FORMS = {
    "QUOTE": quote_form,
    "COND": cond_form,
    "DEFUN": defun_form,
}
