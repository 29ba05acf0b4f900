from __future__ import annotations
from ars_forms.models import Failure, FieldConfig, FieldState, NumericKind, NumericRange
from ars_forms.services.edits import accept_numeric_edit, commit_currency
from ars_forms.services.fields import evaluate_email_field, evaluate_numeric_field, evaluate_text_field

def test_text_field_required_rule():
    assert evaluate_text_field("").state == FieldState.EMPTY
    ev = evaluate_text_field("", FieldConfig(is_required=True))
    assert ev.state == FieldState.INVALID and ev.error == Failure.REQUIRED_MISSING
    assert evaluate_text_field("abc").typed_value == "abc"

def test_email_field():
    assert evaluate_email_field("user@example.com").state == FieldState.RAW_TYPING
    ev = evaluate_email_field("x@")
    assert ev.state == FieldState.INVALID and ev.error == Failure.FORMAT_MISMATCH
    assert evaluate_email_field(None).state == FieldState.EMPTY

def test_numeric_field_parse_and_range():
    ev = evaluate_numeric_field("150", NumericKind.INTEGER, numeric_range=NumericRange(min_value=0, max_value=100))
    assert ev.error == Failure.OUT_OF_RANGE
    assert evaluate_numeric_field("abc", NumericKind.DECIMAL).error == Failure.PARSE_FAILURE
    # vírgula sozinha é pending na digitação, mas falha no commit
    assert evaluate_numeric_field(",", NumericKind.DECIMAL).error == Failure.PARSE_FAILURE
    # moeda não aceita negativo por padrão
    assert evaluate_numeric_field("-5", NumericKind.CURRENCY).error == Failure.OUT_OF_RANGE

def test_numeric_field_currency_display():
    ev = evaluate_numeric_field("1234,5", NumericKind.CURRENCY, FieldConfig(culture="pt-BR"))
    assert ev.state == FieldState.RAW_TYPING
    assert ev.display_text == "R$ 1.234,50"
    assert ev.normalized_value == "1234.5"

def test_accept_numeric_edit_decimal():
    out = accept_numeric_edit("12a", "12")
    assert out.rejected and out.display_text == "12" and out.former_text == "12"

    out = accept_numeric_edit("12,", "12")
    assert not out.rejected and out.former_text == "12,"

    out = accept_numeric_edit(",", "12")
    assert not out.rejected and out.display_text == "," and out.former_text == "12"
    assert out.result.pending

def test_accept_numeric_edit_integer_and_currency():
    out = accept_numeric_edit(".", "5", NumericKind.INTEGER)
    assert out.rejected and out.display_text == "5"
    out = accept_numeric_edit("", "5", NumericKind.INTEGER)
    assert not out.rejected and out.former_text == "5"
    out = accept_numeric_edit("R$ 1.2", "", NumericKind.CURRENCY, "pt-BR")
    assert not out.rejected and out.result.value == 12.0

def test_commit_currency():
    assert commit_currency("1234,5", "pt-BR") == "R$ 1.234,50"
    assert commit_currency("abc", "pt-BR") == "abc"
    assert commit_currency("", "pt-BR") == ""

def test_huge_integer_text_is_rejected_not_raised():
    out = accept_numeric_edit("1" * 5000, "1", NumericKind.INTEGER)
    assert out.rejected and out.display_text == "1"
    ev = evaluate_numeric_field("1" * 5000, NumericKind.INTEGER)
    assert ev.state == FieldState.INVALID and ev.error == Failure.PARSE_FAILURE
