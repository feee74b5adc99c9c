# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

__version__ = "1.0.0"


def get_version():
    return __version__
