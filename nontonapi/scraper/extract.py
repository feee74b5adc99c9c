# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

import re

from bs4 import BeautifulSoup

from nontonapi.scraper.profiles import PROFILES


def _read_field(element, selector, attribute):
    if selector is None:
        nodes = [element]
    else:
        nodes = element.select(selector)

    if not nodes:
        return ""

    if attribute is None:
        return "".join(node.get_text() for node in nodes).strip()

    value = nodes[0].get(attribute)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return value


def _read_fields(element, fields):
    return {
        name: _read_field(element, selector, attribute)
        for name, (selector, attribute) in fields.items()
    }


def _read_list(element, selector):
    return [node.get_text().strip() for node in element.select(selector)]


def _read_table(soup, table):
    detail = {}
    for row in soup.select(table["row"]):
        labels = row.select(table["label"])
        key = "".join(label.get_text() for label in labels)
        key = re.sub(r"\s", "_", key.replace(":", "", 1).lower())
        for label in labels:
            label.decompose()
        detail[key] = row.get_text().strip()
    return detail


def _read_records(element, profile):
    records = []
    for root in element.select(profile["root"]):
        record = _read_fields(root, profile.get("fields", {}))
        for name, selector in profile.get("lists", {}).items():
            record[name] = _read_list(root, selector)
        records.append(record)
    return records


def _read_servers(soup, servers):
    lokal = ""
    alternative = []
    for a in soup.select(servers["link"]):
        text = a.get_text()
        href = a.get("href") or ""
        if servers["marker"] in text.lower():
            lokal = href
        else:
            alternative.append({"server": text.strip(), "url": href})
    return lokal, alternative


def extract(html, profile_name):
    """
    Turn an upstream page into structured records.

    Profiles with a root selector return a list with one record per root
    match (empty when nothing matches). The others return a single record.
    Missing elements become empty strings or empty lists, never errors.
    """
    try:
        profile = PROFILES[profile_name]
    except KeyError:
        raise ValueError(f'Unknown extraction profile "{profile_name}"') from None

    soup = BeautifulSoup(html or "", "html.parser")

    for selector in profile.get("strip", []):
        for node in soup.select(selector):
            node.decompose()

    if "root" in profile:
        return _read_records(soup, profile)

    record = _read_fields(soup, profile.get("fields", {}))

    for name, table in profile.get("tables", {}).items():
        record[name] = _read_table(soup, table)

    for name, selector in profile.get("lists", {}).items():
        record[name] = _read_list(soup, selector)

    for name, sub_profile in profile.get("records", {}).items():
        record[name] = _read_records(soup, sub_profile)

    if "servers" in profile:
        record["lokal"], record["alternative"] = _read_servers(
            soup, profile["servers"]
        )

    return record
