# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

"""
Selector definitions for every extraction profile.

These are coupled to the current NontonAnimeID markup. When the site changes,
only this module should need an update.

Field specs are (selector, attribute) tuples:
- selector None reads from the record root itself
- attribute None reads the stripped text of all matches, otherwise the
  attribute of the first match
"""

CATALOG = {
    "root": "article.animeseries",
    "fields": {
        "title": ("h3.title", None),
        "img": ("img", "src"),
        "eps": (".episodes", None),
        "status": (".status", None),
        "url": ("a", "href"),
    },
}

SEARCH = {
    "strip": [".icon"],
    "root": ".as-anime-grid a",
    "fields": {
        "title": (".as-anime-title", None),
        "img": ("img", "src"),
        "rating": (".as-rating", None),
        "type": (".as-type", None),
        "season": (".as-season", None),
        "synopsis": (".as-synopsis", None),
        "url": (None, "href"),
    },
    "lists": {
        "genre": ".as-genres span",
    },
}

DETAIL = {
    "strip": [".detail-separator"],
    "fields": {
        "title": (".anime-card__sidebar img", "alt"),
        "img": (".anime-card__sidebar img", "src"),
        "synopsis": (".synopsis-prose", None),
    },
    "tables": {
        "detail": {
            "row": ".details-list li",
            "label": ".detail-label",
        },
    },
    "lists": {
        "genre": ".anime-card__genres a",
    },
    "records": {
        "episodes": {
            "root": ".episode-list-items a",
            "fields": {
                "eps": (".ep-title", None),
                "date": (".ep-date", None),
                "url": (None, "href"),
            },
        },
    },
}

EPISODE_SERVERS = {
    "fields": {
        "title": ("h1.entry-title", None),
        "date": (".bottomtitle time", None),
    },
    "servers": {
        "link": ".listlink a",
        # first-party server, input of the download resolution
        "marker": "lokal",
    },
}

PROFILES = {
    "catalog": CATALOG,
    "search": SEARCH,
    "detail": DETAIL,
    "episodeServers": EPISODE_SERVERS,
}
