"""Identifier and filename derivation for generated scripts."""

from __future__ import annotations

from typing import List

COMPANY_PREFIX_FALLBACK = "com"
DEPLOYMENT_PREFIX = "customdeploy_"


def script_id_for(script_name: str) -> str:
    """Lowercase ``script_name`` and replace spaces with underscores.

    Examples::

        script_id_for("My Report") -> "my_report"
    """

    return script_name.lower().replace(" ", "_")


def deployment_id_for(script_name: str) -> str:
    return DEPLOYMENT_PREFIX + script_id_for(script_name)


def company_prefix(company_name: str) -> str:
    """Return the three character file prefix for a company."""

    company_name = company_name.strip()
    if not company_name:
        return COMPANY_PREFIX_FALLBACK
    return company_name.lower()[:3]


def prefixed_file_name(company_name: str, script_name: str) -> str:
    return f"{company_prefix(company_name)}_{script_name}"


def to_snake_case(value: str) -> str:
    """Convert a project name to a snake_case script name.

    Word boundaries are lower-to-upper transitions and any character that is
    not a letter or digit. Non-ASCII letters are kept.

    Examples::

        to_snake_case("acme-proj") -> "acme_proj"
        to_snake_case("SalesOrderSync") -> "sales_order_sync"
        to_snake_case("Café") -> "café"
    """

    words: List[str] = []
    current: List[str] = []
    previous = ""
    for char in value:
        if not char.isalnum():
            if current:
                words.append("".join(current))
                current = []
        else:
            if char.isupper() and current and (previous.islower() or previous.isdigit()):
                words.append("".join(current))
                current = []
            current.append(char.lower())
        previous = char
    if current:
        words.append("".join(current))
    return "_".join(words)


__all__ = [
    "COMPANY_PREFIX_FALLBACK",
    "company_prefix",
    "deployment_id_for",
    "prefixed_file_name",
    "script_id_for",
    "to_snake_case",
]
