import pytest

from fakes import lokal_page
from nontonapi.downloads.helpers.script_params import (
    ConstAssignmentGrammar,
    ScriptParameterGrammar,
    extract_script_params,
)
from nontonapi.providers.errors import MalformedUpstreamPage


class TestExtractScriptParams:
    def test_both_parameters(self):
        html = lokal_page(encrypted="E1", title="One Piece 1100")

        params = extract_script_params(html)

        assert params == {"encrypted_param": "E1", "title_param": "One Piece 1100"}

    def test_missing_title_is_empty_string(self):
        params = extract_script_params(lokal_page(encrypted="E1"))

        assert params["encrypted_param"] == "E1"
        assert params["title_param"] == ""

    def test_missing_encrypted_param_raises(self):
        with pytest.raises(MalformedUpstreamPage):
            extract_script_params(lokal_page(title="only title"))

    def test_no_script_raises(self):
        with pytest.raises(MalformedUpstreamPage):
            extract_script_params("<html><body>nothing</body></html>")

    def test_value_with_markup_characters(self):
        value = 'a<b>&c/"d'
        html = lokal_page(encrypted=value)

        assert extract_script_params(html)["encrypted_param"] == value

    def test_later_script_block_is_searched(self):
        html = (
            "<script>var ads = 1;</script>"
            '<script>const ENCRYPTED_PARAM = "late";</script>'
        )

        assert extract_script_params(html)["encrypted_param"] == "late"

    def test_custom_grammar(self):
        class JsonLikeGrammar(ScriptParameterGrammar):
            def find(self, script, name):
                marker = f"{name}:"
                if marker not in script:
                    return None
                return script.split(marker, 1)[1].split(",", 1)[0].strip()

        html = "<script>ENCRYPTED_PARAM: E9, TITLE_PARAM: T9,</script>"

        params = extract_script_params(html, grammar=JsonLikeGrammar())

        assert params == {"encrypted_param": "E9", "title_param": "T9"}


class TestConstAssignmentGrammar:
    def test_absent_name(self):
        assert ConstAssignmentGrammar().find('const X = "1";', "Y") is None

    def test_requires_exact_spacing(self):
        assert ConstAssignmentGrammar().find('const X="1";', "X") is None
