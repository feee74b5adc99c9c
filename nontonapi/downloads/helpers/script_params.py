# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

"""
Inline script parameters of a lokal player page.

The page embeds its parameters as

    const NAME = "value";

The value may hold characters that confuse an HTML parser, so it is matched
on the raw script text. Only the script blocks are located with
BeautifulSoup. Another ScriptParameterGrammar can replace the regex one
without touching the resolution pipeline.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

from bs4 import BeautifulSoup

from nontonapi.downloads.helpers.download_links import ScriptParameters
from nontonapi.providers.errors import MalformedUpstreamPage

ENCRYPTED_PARAM = "ENCRYPTED_PARAM"
TITLE_PARAM = "TITLE_PARAM"


class ScriptParameterGrammar(ABC):
    @abstractmethod
    def find(self, script: str, name: str) -> Optional[str]:
        """Return the value declared for `name`, or None if absent."""


class ConstAssignmentGrammar(ScriptParameterGrammar):
    def find(self, script, name):
        # greedy up to the last `";` on the line
        match = re.search(rf'const {re.escape(name)} = "(.*)";', script)
        if not match:
            return None
        return match.group(1)


DEFAULT_GRAMMAR = ConstAssignmentGrammar()


def get_script_blocks(html):
    soup = BeautifulSoup(html or "", "html.parser")
    return [script.string or script.get_text() for script in soup.find_all("script")]


def extract_script_params(html, grammar=DEFAULT_GRAMMAR) -> ScriptParameters:
    """
    Read ENCRYPTED_PARAM (mandatory) and TITLE_PARAM (optional, defaults to
    an empty string) from the inline scripts of a lokal player page.

    The first script block is preferred, later blocks are only searched when
    it does not declare ENCRYPTED_PARAM.
    """
    for script in get_script_blocks(html):
        encrypted_param = grammar.find(script, ENCRYPTED_PARAM)
        if encrypted_param is None:
            continue

        title_param = grammar.find(script, TITLE_PARAM)
        return {
            "encrypted_param": encrypted_param,
            "title_param": title_param or "",
        }

    raise MalformedUpstreamPage(f"{ENCRYPTED_PARAM} not found in page scripts")
