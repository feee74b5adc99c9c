# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337


class NontonError(Exception):
    """Base class for every failure raised inside the scrapers."""

    code = 500


class ValidationError(NontonError):
    """A required input such as the search query or a page URL is missing."""

    code = 400


class UpstreamFetchError(NontonError):
    """Network or HTTP failure against the catalog site or the lokal host."""


class MalformedUpstreamPage(NontonError):
    """The page script lacks the mandatory ENCRYPTED_PARAM."""


class TokenAcquisitionFailed(NontonError):
    pass


class ManifestParseError(NontonError):
    pass
