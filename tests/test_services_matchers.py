from __future__ import annotations
import pytest
from ars_forms.models import DocumentKind
from ars_forms.services.matchers import Pattern, is_cep, is_email, is_tracking_code, matches

def test_cep_shapes():
    assert is_cep("12345-678") and is_cep("12345678")
    assert not is_cep("1234-567")
    assert not is_cep("12345-678\n")  # casamento de ponta a ponta
    assert not is_cep("cep 12345678")
    assert not is_cep(None) and not is_cep("")

def test_email_shapes():
    assert is_email("user@example.com")
    assert is_email("USER.Name+tag@Example.COM.br")
    assert is_email("o'neil@mail-server.org")
    assert not is_email("user@@example.com")
    assert not is_email("user@example")
    assert not is_email(None)

def test_tracking_code_shapes():
    assert is_tracking_code("AA123456789BR")
    assert is_tracking_code("aa1bb")
    assert not is_tracking_code("A123BR")
    assert not is_tracking_code("AA12B")

def test_matches_dispatch():
    assert matches(Pattern.EMAIL, "user@example.com")
    assert matches("tracking_code", "SS987654321BR")
    assert matches(DocumentKind.CPF, "111.444.777-35")
    assert not matches("CNPJ", "11.222.333/0001-82")
    assert matches(DocumentKind.CEP, "12345-678")
    assert not matches("email", None)
    with pytest.raises(ValueError):
        matches("telefone", "123")
