from __future__ import annotations
import logging
import pytest
from ars_forms.utils.config import settings, set_settings, setting
from ars_forms.utils.log import get_logger
from ars_forms.utils.text import only_digits, to_title_case, first_letter_to_upper, as_text

def test_settings_defaults_env_and_overrides(monkeypatch):
    assert setting("ARS_DEFAULT_CULTURE") == "invariant"
    assert setting("ARS_COMMA_DECIMAL_CULTURE") == "pt-BR"

    set_settings({"ARS_DEFAULT_CULTURE": "en-US"})
    assert setting("ARS_DEFAULT_CULTURE") == "en-US"

    # ENV tem prioridade sobre override
    monkeypatch.setenv("ARS_DEFAULT_CULTURE", "de-DE")
    settings.cache_clear()
    assert setting("ARS_DEFAULT_CULTURE") == "de-DE"

def test_setting_unknown_key_friendly_error():
    with pytest.raises(KeyError) as exc:
        setting("NAO_EXISTE")
    assert "ARS_DEFAULT_CULTURE" in str(exc.value)

def test_get_logger_single_handler_and_level():
    set_settings({"ARS_LOG_LEVEL": "debug"})
    log = get_logger("ars_forms.test")
    get_logger("ars_forms.test")
    assert log.handlers == []
    assert len(logging.getLogger("ars_forms").handlers) == 1
    assert log.getEffectiveLevel() == logging.DEBUG

def test_log_level_follows_settings_after_import():
    # logger de módulo já importado passa a respeitar o novo nível
    from ars_forms.services import numeric
    assert not numeric.log.isEnabledFor(logging.DEBUG)
    set_settings({"ARS_LOG_LEVEL": "DEBUG"})
    assert numeric.log.isEnabledFor(logging.DEBUG)
    set_settings({"ARS_LOG_LEVEL": "barulhento"})
    assert numeric.log.getEffectiveLevel() == logging.WARNING

def test_text_utils():
    assert as_text(None) == ""
    assert as_text(123) == "123"
    assert only_digits("111.444.777-35") == "11144477735"
    assert only_digits(None) == ""
    assert to_title_case("JOÃO da SILVA") == "João Da Silva"
    assert to_title_case(None) == ""
    assert to_title_case("ANA-MARIA de souza") == "Ana-Maria De Souza"
    assert first_letter_to_upper("maria") == "Maria"
    assert first_letter_to_upper("") == ""
    assert first_letter_to_upper(None) is None
