"""Central registry for minishift CLI aliases.

The dispatcher discovers domains from folder names under ``minishift/cli/``;
extra spellings accepted on the command line are listed here.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Iterable, List, Tuple

from minishift.core.constants import PROFILE_CMD, PROFILE_CMD_ALIASES


# Canonical domain (folder) -> extra CLI aliases.
DOMAIN_ALIASES: Dict[str, List[str]] = {
    PROFILE_CMD: list(PROFILE_CMD_ALIASES),
}


def domain_cli_names(canonical_domain: str) -> Tuple[str, List[str]]:
    """Return (primary, aliases) for an on-disk canonical domain name."""
    primary = canonical_domain
    seen: set[str] = set()
    aliases: List[str] = []
    for a in DOMAIN_ALIASES.get(canonical_domain, []):
        if not a or a == primary or a in seen:
            continue
        seen.add(a)
        aliases.append(a)
    return primary, aliases


@lru_cache(maxsize=32)
def build_domain_alias_index(canonical_domains: Tuple[str, ...]) -> Dict[str, str]:
    """Build a lookup map of {cli_token -> canonical_domain}."""
    index: Dict[str, str] = {}
    for canonical in canonical_domains:
        primary, aliases = domain_cli_names(canonical)
        index[canonical] = canonical
        index[primary] = canonical
        for a in aliases:
            index[a] = canonical
    return index


def resolve_canonical_domain(
    token: str,
    *,
    canonical_domains: Iterable[str],
) -> str | None:
    """Resolve a CLI domain token to a canonical on-disk domain folder name."""
    domains_tuple = tuple(sorted(set(str(d) for d in canonical_domains if d)))
    index = build_domain_alias_index(domains_tuple)
    return index.get(token)
